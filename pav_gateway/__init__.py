"""Stub gateway for the ValidatePaymentArrangement SOAP operation."""
