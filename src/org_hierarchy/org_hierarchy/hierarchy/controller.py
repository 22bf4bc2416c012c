from __future__ import annotations

import logging

import mysql.connector
from flask import Flask, jsonify, session

from ..common.validators import require_non_empty
from ..container import Container
from ..core.constants import SESSION_EXPANDED_KEY, SESSION_SNAPSHOT_KEY
from ..core.exceptions import ValidationError
from .expansion import ExpansionState
from .mapper import forest_to_doc
from .service import HierarchyView

logger = logging.getLogger(__name__)

# Failures of the data source; the view cannot be produced at all.
FETCH_ERRORS = (mysql.connector.Error, OSError, ValidationError)

FETCH_FAILED_MESSAGE = "Failed to fetch organization hierarchy."


def register(app: Flask, container: Container) -> None:
    def ok(data):
        return jsonify({"success": True, "data": data})

    def fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def load_state(view: HierarchyView) -> ExpansionState:
        # re-seed only when the reporting lines changed since the last request
        if session.get(SESSION_SNAPSHOT_KEY) != view.snapshot_key:
            state = ExpansionState.seeded(view.forest)
            save_state(view, state)
            return state
        return ExpansionState.from_ids(session.get(SESSION_EXPANDED_KEY))

    def save_state(view: HierarchyView, state: ExpansionState) -> None:
        session[SESSION_SNAPSHOT_KEY] = view.snapshot_key
        session[SESSION_EXPANDED_KEY] = state.to_list()

    def hierarchy_body(view: HierarchyView, state: ExpansionState) -> dict:
        return {
            "organization": view.organization,
            "totalEmployees": view.total_employees,
            "hierarchy": forest_to_doc(view.forest),
            "expanded": state.to_list(),
            "stats": {
                "nodes": view.stats.node_count,
                "roots": view.stats.root_count,
                "maxDepth": view.stats.max_depth,
            },
        }

    @app.route("/api/org-hierarchy", methods=["GET"], endpoint="org_hierarchy")
    def org_hierarchy():
        try:
            view = container.hierarchy_service.load_view()
        except FETCH_ERRORS:
            logger.exception("Loading org hierarchy failed")
            return fail(FETCH_FAILED_MESSAGE, 502)

        state = load_state(view)
        return ok(hierarchy_body(view, state))

    @app.route("/api/org-hierarchy/toggle/<node_id>", methods=["POST"], endpoint="org_hierarchy_toggle")
    def org_hierarchy_toggle(node_id: str):
        try:
            node_id = require_non_empty(node_id, "Node id")
        except ValidationError as e:
            return fail(str(e), 400)

        try:
            view = container.hierarchy_service.load_view()
        except FETCH_ERRORS:
            logger.exception("Loading org hierarchy failed")
            return fail(FETCH_FAILED_MESSAGE, 502)

        state = load_state(view)
        expanded = state.toggle(node_id)
        save_state(view, state)
        return ok({"id": node_id, "expanded": expanded, "expandedIds": state.to_list()})

    @app.route("/api/org-hierarchy/expand-all", methods=["POST"], endpoint="org_hierarchy_expand_all")
    def org_hierarchy_expand_all():
        try:
            view = container.hierarchy_service.load_view()
        except FETCH_ERRORS:
            logger.exception("Loading org hierarchy failed")
            return fail(FETCH_FAILED_MESSAGE, 502)

        state = load_state(view)
        state.expand_all(view.forest)
        save_state(view, state)
        return ok({"expandedIds": state.to_list()})

    @app.route("/api/org-hierarchy/collapse-all", methods=["POST"], endpoint="org_hierarchy_collapse_all")
    def org_hierarchy_collapse_all():
        try:
            view = container.hierarchy_service.load_view()
        except FETCH_ERRORS:
            logger.exception("Loading org hierarchy failed")
            return fail(FETCH_FAILED_MESSAGE, 502)

        state = load_state(view)
        state.collapse_all()
        save_state(view, state)
        return ok({"expandedIds": state.to_list()})

    @app.route("/api/org-hierarchy/supervisors", methods=["GET"], endpoint="org_hierarchy_supervisors")
    def org_hierarchy_supervisors():
        try:
            view = container.hierarchy_service.load_view()
        except FETCH_ERRORS:
            logger.exception("Loading org hierarchy failed")
            return fail(FETCH_FAILED_MESSAGE, 502)

        return ok(container.hierarchy_service.list_reporting_lines(view))
