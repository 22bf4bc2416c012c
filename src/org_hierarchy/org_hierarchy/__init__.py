"""Org Hierarchy package.

Builds reporting-line forests from flat employee snapshots and keeps the
per-session expand/collapse state of the hierarchy view. Organized by feature
modules (employees, hierarchy) with a thin Flask controller layer over
service/repository layers.
"""
