"""Client and contract domain: model, ports and services."""
