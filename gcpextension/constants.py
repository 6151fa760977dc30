"""Names, image names and paths used by the GCP provider extension."""

import os

# Type of resources managed by the GCP actuator.
TYPE = "gcp"
# Type of resources managed by the GCP DNS actuator.
DNS_TYPE = "google-clouddns"

# Name of the GCP provider.
NAME = "provider-gcp"

# Image names.
CLOUD_CONTROLLER_MANAGER_IMAGE_NAME = "cloud-controller-manager"
CSI_DRIVER_IMAGE_NAME = "csi-driver"
CSI_PROVISIONER_IMAGE_NAME = "csi-provisioner"
CSI_ATTACHER_IMAGE_NAME = "csi-attacher"
CSI_SNAPSHOTTER_IMAGE_NAME = "csi-snapshotter"
CSI_RESIZER_IMAGE_NAME = "csi-resizer"
CSI_SNAPSHOT_CONTROLLER_IMAGE_NAME = "csi-snapshot-controller"
CSI_NODE_DRIVER_REGISTRAR_IMAGE_NAME = "csi-node-driver-registrar"
CSI_LIVENESS_PROBE_IMAGE_NAME = "csi-liveness-probe"
MACHINE_CONTROLLER_MANAGER_IMAGE_NAME = "machine-controller-manager"
MACHINE_CONTROLLER_MANAGER_PROVIDER_GCP_IMAGE_NAME = "machine-controller-manager-provider-gcp"

# Field in a secret where the service account JSON is stored.
SERVICE_ACCOUNT_JSON_FIELD = "serviceaccount.json"
# Field in a machine class secret where the service account JSON is stored.
SERVICE_ACCOUNT_JSON_MCM = "serviceAccountJSON"

# Component names.
CLOUD_CONTROLLER_MANAGER_NAME = "cloud-controller-manager"
CSI_CONTROLLER_NAME = "csi-driver-controller"
CSI_CONTROLLER_CONFIG_NAME = "csi-driver-controller-config"
CSI_CONTROLLER_OBSERVABILITY_CONFIG_NAME = "csi-driver-controller-observability-config"
CSI_NODE_NAME = "csi-driver-node"
CSI_DRIVER_NAME = "csi-driver"
CSI_PROVISIONER_NAME = "csi-provisioner"
CSI_ATTACHER_NAME = "csi-attacher"
CSI_SNAPSHOTTER_NAME = "csi-snapshotter"
CSI_RESIZER_NAME = "csi-resizer"
CSI_SNAPSHOT_CONTROLLER_NAME = "csi-snapshot-controller"
CSI_NODE_DRIVER_REGISTRAR_NAME = "csi-node-driver-registrar"
CSI_LIVENESS_PROBE_NAME = "csi-liveness-probe"
MACHINE_CONTROLLER_MANAGER_NAME = "machine-controller-manager"
MACHINE_CONTROLLER_MANAGER_VPA_NAME = "machine-controller-manager-vpa"
MACHINE_CONTROLLER_MANAGER_MONITORING_CONFIG_NAME = "machine-controller-manager-monitoring-config"

# Kubernetes version for which the shoot's CSI migration is performed.
CSI_MIGRATION_KUBERNETES_VERSION = "1.18"

# Name of the configmap containing the cloud provider config.
CLOUD_PROVIDER_CONFIG_NAME = "cloud-provider-config"

# Chart locations.
CHARTS_PATH = os.path.join("charts")
INTERNAL_CHARTS_PATH = os.path.join(CHARTS_PATH, "internal")

# API group of extension resources.
EXTENSIONS_GROUP = "extensions.gardener.cloud"
# Username prefix for components deployed by GCP.
USERNAME_PREFIX = f"{EXTENSIONS_GROUP}:{NAME}:"