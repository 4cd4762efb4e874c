"""Validation of the cloud provider service-account secret."""