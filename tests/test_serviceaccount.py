import pytest

from gcpextension.constants import SERVICE_ACCOUNT_JSON_FIELD
from gcpextension.serviceaccount import (
    Secret,
    ServiceAccount,
    ServiceAccountError,
    extract_service_account_project_id,
    read_service_account_secret,
    service_account_from_secret,
)

ACCOUNT_JSON = b'{"project_id": "project"}'
OTHER_FIELD = "other"
EMPTY_DOCUMENT = b"{}"


def make_resource(data):
    return Secret(name="gcp-credentials", namespace="foo", data=data)


def test_read_returns_stored_bytes():
    resource = make_resource({SERVICE_ACCOUNT_JSON_FIELD: ACCOUNT_JSON})
    assert read_service_account_secret(resource) == ACCOUNT_JSON


def test_read_missing_field_raises():
    resource = make_resource({OTHER_FIELD: EMPTY_DOCUMENT})
    with pytest.raises(ServiceAccountError, match="foo/gcp-credentials doesn't have a service account json"):
        read_service_account_secret(resource)


def test_extract_project_id():
    assert extract_service_account_project_id(ACCOUNT_JSON) == "project"


def test_extract_project_id_from_str():
    assert extract_service_account_project_id('{"project_id": "project", "x": 1}') == "project"


@pytest.mark.parametrize("document", [b"{}", b'{"project_id": ""}', b"null", b'{"project_id": null}'])
def test_extract_without_project_id_raises(document):
    with pytest.raises(ServiceAccountError, match="no service account specified"):
        extract_service_account_project_id(document)


@pytest.mark.parametrize("document", [b"not json", b"[1, 2]", b'{"project_id": 5}'])
def test_extract_invalid_document_raises(document):
    with pytest.raises(ServiceAccountError):
        extract_service_account_project_id(document)


def test_service_account_from_secret_keeps_raw_data():
    resource = make_resource({SERVICE_ACCOUNT_JSON_FIELD: ACCOUNT_JSON})
    account = service_account_from_secret(resource)
    assert account == ServiceAccount(raw=ACCOUNT_JSON, project_id="project")


def test_service_account_from_secret_propagates_missing_field():
    with pytest.raises(ServiceAccountError):
        service_account_from_secret(make_resource({}))