"""
HTML view routes for the task list client.

Implements the login page and the task list page. Route handlers stay
thin: they build a :class:`SessionManager` or :class:`TaskListSynchronizer`
around the Flask session, call one operation, and either redirect or
render. The module is organised into three sections:

1. **Helper functions** -- API client construction, the session-backed
   context, the redirecting navigator and the ``login_required`` decorator.
2. **Authentication routes** -- login and logout.
3. **Task routes** -- list, add, edit, update, toggle and delete.

Successful mutations redirect back to the list (post/redirect/get).
Failures re-render the list with the error message in place and a 502
status, keeping the user's typed input and any row left in editing.
"""

from __future__ import annotations

import logging
from functools import wraps

from flask import (
    Blueprint,
    abort,
    current_app,
    flash,
    g,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from ..api import TaskApiClient
from ..models import Route
from ..session import SessionContext, SessionManager
from ..storage import TokenStore
from ..synchronizer import TaskListSynchronizer

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


# =====================================================================
# Helper Functions
# =====================================================================


class FlaskNavigator:
    """Navigator that turns the requested route into a Flask redirect."""

    def __init__(self):
        self.route: Route | None = None

    def go(self, route: Route) -> None:
        self.route = route

    def response(self):
        """
        Build the redirect for the last requested route.

        Raises:
            RuntimeError: If nothing requested navigation.
        """
        if self.route is None:
            raise RuntimeError("No navigation was requested")
        return redirect(url_for(f"views.{self.route.value}"))


def _api() -> TaskApiClient:
    """Build a task API client from the application config."""
    return TaskApiClient(
        current_app.config["TASK_API_URL"],
        timeout=current_app.config["TASK_API_TIMEOUT"],
    )


def _session_context() -> SessionContext:
    """Wrap the Flask session cookie as the client's token storage."""
    return SessionContext(TokenStore(session))


def _session_manager() -> tuple[SessionManager, FlaskNavigator]:
    navigator = FlaskNavigator()
    return SessionManager(_session_context(), _api(), navigator), navigator


def _render_tasks(sync: TaskListSynchronizer, status_code: int = 200):
    """
    Render the task list page from the synchronizer's state.

    Args:
        sync: Synchronizer holding the tasks, row states, inputs and error.
        status_code: HTTP status code for the response.

    Returns:
        A ``(body, status_code)`` tuple.
    """
    return (
        render_template(
            "tasks.html",
            tasks=sync.tasks,
            row_state=sync.row_state,
            error=sync.error,
            new_title=sync.title,
            new_description=sync.description,
        ),
        status_code,
    )


def login_required(view_func):
    """
    Decorator that requires a stored token before running a view.

    Only the presence of the token is checked. On success a
    :class:`TaskListSynchronizer` bound to the session is placed on
    ``g.sync``; otherwise the user is sent to the login page with a
    "login required" message.
    """

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        manager, navigator = _session_manager()
        if manager.require_session() is None:
            flash(manager.error, "error")
            return navigator.response()

        g.sync = TaskListSynchronizer(manager.context, manager.api)
        return view_func(*args, **kwargs)

    return wrapper


# =====================================================================
# Authentication Routes
# =====================================================================


@views_bp.route("/health", methods=["GET"])
def health_check():
    """Liveness check; public."""
    return {"status": "healthy", "service": "task-client"}, 200


@views_bp.route("/login", methods=["GET"])
def login():
    """
    Render the login page.

    Users who already hold a token go straight to the task list.
    """
    if _session_context().is_authenticated:
        return redirect(url_for("views.tasks"))
    return render_template("login.html", error="", username="")


@views_bp.route("/login", methods=["POST"])
def login_submit():
    """
    Handle login form submission.

    Forwards the credentials to the task API's login endpoint. On success
    the token is stored in the session and the user is redirected to the
    task list; on failure the form is re-rendered with the error.
    """
    username = request.form.get("username", "")
    password = request.form.get("password", "")
    if not username.strip() or not password:
        return (
            render_template(
                "login.html",
                error="Username and password are required.",
                username=username,
            ),
            400,
        )

    manager, navigator = _session_manager()
    result = manager.login(username, password)
    if result.ok:
        return navigator.response()

    return render_template("login.html", error=manager.error, username=username), 401


@views_bp.route("/logout", methods=["POST"])
def logout():
    """Clear the stored token and redirect to the login page."""
    manager, navigator = _session_manager()
    manager.logout()
    flash("Logged out.", "success")
    return navigator.response()


# =====================================================================
# Task Routes
# =====================================================================


@views_bp.route("/")
def index():
    return redirect(url_for("views.tasks"))


@views_bp.route("/tasks", methods=["GET"])
@login_required
def tasks():
    """Load the task list from the API and render it."""
    sync = g.sync
    result = sync.load()
    return _render_tasks(sync, 200 if result.ok else 502)


@views_bp.route("/tasks", methods=["POST"])
@login_required
def add_task():
    """Create a task from the add form."""
    sync = g.sync
    sync.load()
    sync.title = request.form.get("title", "")
    sync.description = request.form.get("description", "")

    if sync.add().ok:
        return redirect(url_for("views.tasks"))
    return _render_tasks(sync, 502)


@views_bp.route("/tasks/<int:task_id>/edit", methods=["GET"])
@login_required
def edit_task(task_id: int):
    """Render the list with one row switched to editing."""
    sync = g.sync
    result = sync.load()
    if sync.get(task_id) is None:
        if not result.ok:
            return _render_tasks(sync, 502)
        abort(404)

    sync.begin_edit(task_id)
    return _render_tasks(sync)


@views_bp.route("/tasks/<int:task_id>/update", methods=["POST"])
@login_required
def update_task(task_id: int):
    """
    Save a row's edits.

    On failure the row stays in editing with the submitted values.
    """
    sync = g.sync
    sync.load()
    result = sync.update(
        task_id,
        request.form.get("title", ""),
        request.form.get("description", ""),
    )
    if result.ok:
        return redirect(url_for("views.tasks"))
    return _render_tasks(sync, 502)


@views_bp.route("/tasks/<int:task_id>/toggle", methods=["POST"])
@login_required
def toggle_task(task_id: int):
    """Flip a task's completion flag on the server."""
    sync = g.sync
    sync.load()
    if sync.toggle_completion(task_id).ok:
        return redirect(url_for("views.tasks"))
    return _render_tasks(sync, 502)


@views_bp.route("/tasks/<int:task_id>/delete", methods=["POST"])
@login_required
def delete_task(task_id: int):
    """
    Delete a task.

    The browser asks for confirmation and submits ``confirm=yes``; without
    it no request is sent to the API.
    """
    confirmed = request.form.get("confirm") == "yes"
    if not confirmed:
        logger.info("Delete of task %s was not confirmed", task_id)
        flash("Delete cancelled.", "info")
        return redirect(url_for("views.tasks"))

    sync = g.sync
    sync.load()
    result = sync.remove(task_id, confirm=lambda _: confirmed)
    if not result.ok:
        return _render_tasks(sync, 502)
    return redirect(url_for("views.tasks"))
