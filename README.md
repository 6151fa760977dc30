# gcpextension

This package holds building blocks for running Kubernetes shoot clusters on
Google Cloud Platform. It reads service-account credentials, makes label
strings follow GCP's rules, manages DNS record sets, and cleans up the
firewalls and routes that Kubernetes creates. It also builds Terraform
template values and turns Terraform outputs into an infrastructure status.

The package does not talk to GCP or Kubernetes itself. Each client works
through a service object that you supply, which must provide the few methods
the client calls. That makes the logic easy to drive from your own API
wrappers or from test doubles.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `gcpextension.constants` holds the provider type and name, image names, component names, chart paths (`CHARTS_PATH`, `INTERNAL_CHARTS_PATH`), `SERVICE_ACCOUNT_JSON_FIELD` and `USERNAME_PREFIX`.
- `gcpextension.serviceaccount` works with the `Secret` and `ServiceAccount` dataclasses.
  - `read_service_account_secret` returns the bytes stored under `serviceaccount.json`.
  - `extract_service_account_project_id` reads `project_id` from the JSON.
  - `service_account_from_secret` combines the two.
  - Missing fields, invalid JSON, or an empty project id raise `ServiceAccountError`, which is a `ValueError`.
- `gcpextension.subnet` provides `Subnet`, `SubnetPurpose` (`NODES`, `INTERNAL`) and `find_subnet_for_purpose`. That function returns the first subnet with the given purpose. If no subnet matches, it raises `SubnetNotFoundError`, which is a `LookupError`.
- `gcpextension.labels` has three functions.
  - `sanitize_gcp_label` and `sanitize_gcp_label_value` lower-case the text and replace every character other than `a-z`, `0-9`, `_` and `-` with `_`. They then cut the result to 63 characters.
  - A label key also has its leading digits and underscores removed.
  - `gce_instance_labels(name, labels)` builds the instance label map. The sanitised `name` goes under `"name"`, and each sanitised pool label whose key is not empty is added.
- `gcpextension.dns` provides the `DNSClient(service, project_id)` class.
  - `get_managed_zones` maps each zone's DNS name to its `project/zone` id. `\052.` becomes `*.` and a trailing dot is dropped.
  - `create_or_update_record_set` sends a `Change` only when the wanted records or TTL differ from what exists.
  - `delete_record_set` deletes the record set if it is present.
  - The helper functions are `normalize_zone_name`, `ensure_trailing_dot` and `format_rrdatas`. `format_rrdatas` adds a trailing dot to CNAME targets.
- `gcpextension.compute` provides `ComputeClient(service, project_id).get_external_addresses(region)` and the pure function `external_addresses`. Both map each `EXTERNAL` `Address` to the last path segment of each of its users. Only addresses that are `IN_USE` list their users.
- `gcpextension.infrastructure` works with the `Firewall` and `Route` dataclasses, through any object that follows the `ComputeApi` protocol.
  - `list_kubernetes_firewalls` returns firewalls whose name starts with `k8s` and that are tagged with the shoot namespace. It also returns firewalls whose name starts with the shoot namespace.
  - `list_kubernetes_routes` returns routes named `shoot--…` whose next-hop instance starts with the shoot namespace.
  - `delete_firewalls` and `delete_routes` delete the named resources and stop at the first error.
  - `cleanup_kubernetes_firewalls` and `cleanup_kubernetes_routes` list and then delete.
- `gcpextension.terraform` has four functions.
  - `compute_terraformer_template_values(infra, account, config)` builds the template values from an `Infrastructure`, a `ServiceAccount` and an `InfrastructureConfig`. It covers the VPC, cloud router, Cloud NAT, flow logs and output keys.
  - `extract_terraform_state(tf, config)` asks a terraformer object for the output variables it needs through `get_state_output_variables(*keys)`, and returns a `TerraformState`.
  - `status_from_terraform_state` turns that state into an `InfrastructureStatus`.
  - `compute_status` does both steps.

## Examples

```python
from gcpextension.labels import sanitize_gcp_label, sanitize_gcp_label_value

sanitize_gcp_label("////Abcd-efg")        # "abcd-efg"
sanitize_gcp_label_value("////Abcd-efg")  # "____abcd-efg"
```

```python
from gcpextension.serviceaccount import Secret, service_account_from_secret

credentials = Secret(
    name="cloudprovider",
    namespace="shoot--foo--bar",
    data={"serviceaccount.json": b'{"project_id": "my-project"}'},
)
account = service_account_from_secret(credentials)
account.project_id  # "my-project"
```

## What it does not do

- There is no command-line program, controller or reconciliation loop.
- There is no GCP or Kubernetes API client. You pass in the DNS, compute and terraformer service objects, and `Secret` objects.
- It does not render Terraform files and does not run Terraform. It only computes template values and reads outputs.
- It does not generate worker machine classes or machine deployments. Only the instance label helpers are provided.