"""Wrappers for SendGrid API resources."""

from sendgrid_sdk.resources.api_keys import APIKeys
from sendgrid_sdk.resources.asm import GlobalSuppressions, Suppressions, UnsubscribeGroups
from sendgrid_sdk.resources.batches import Batches
from sendgrid_sdk.resources.base import Resource
from sendgrid_sdk.resources.stats import GlobalStats
from sendgrid_sdk.resources.templates import Templates, Versions

__all__ = [
    "Resource",
    "APIKeys",
    "UnsubscribeGroups",
    "Suppressions",
    "GlobalSuppressions",
    "GlobalStats",
    "Templates",
    "Versions",
    "Batches",
]
