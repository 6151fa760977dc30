"""GCP provider logic for Kubernetes shoot clusters: service accounts, labels, DNS, compute addresses, firewall and route cleanup, and Terraform values and status."""

__version__ = "0.1.0"