"""Enrichment passes, in the order the pipeline must run them."""

from __future__ import annotations

from slnkit.enrichers.base import Enricher
from slnkit.enrichers.configurations import (
    enrich_project_configurations,
    enrich_solution_configurations,
)
from slnkit.enrichers.folder_files import enrich_solution_folder_files
from slnkit.enrichers.nested_projects import enrich_nested_projects
from slnkit.enrichers.projects import enrich_projects
from slnkit.enrichers.solution_guid import enrich_solution_guid
from slnkit.enrichers.solution_properties import enrich_solution_properties

# Everything after "projects" resolves ids created by it.
ENRICHERS: tuple[tuple[str, Enricher], ...] = (
    ("projects", enrich_projects),
    ("solution_configurations", enrich_solution_configurations),
    ("project_configurations", enrich_project_configurations),
    ("solution_folder_files", enrich_solution_folder_files),
    ("nested_projects", enrich_nested_projects),
    ("solution_properties", enrich_solution_properties),
    ("solution_guid", enrich_solution_guid),
)

__all__ = [
    "ENRICHERS",
    "Enricher",
    "enrich_nested_projects",
    "enrich_project_configurations",
    "enrich_projects",
    "enrich_solution_configurations",
    "enrich_solution_folder_files",
    "enrich_solution_guid",
    "enrich_solution_properties",
]
