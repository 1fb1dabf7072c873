"""
Application shell: session state and backend orchestration.

The shell owns the top-level state of the dashboard (current user, recipe list, visible
screen, loading and connectivity flags) and runs the five operations the UI triggers:
probe-and-restore at startup, login, logout, load-recipes and create-recipe.

State lives in an explicit AppState object handed to the shell, so the Streamlit layer
can keep one per browser session in st.session_state and tests can inspect it directly.

User-facing alerts go through an injected notifier `notify(level, message)`; the shell
itself never touches the UI toolkit.

# NOTE: create_recipe prepends the echoed record to the local list when it is already
    published. This is an optimistic update: it does not re-sort or deduplicate against
    a concurrent load_recipes. load_recipes is the authoritative refresh.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from recipes_client.backend import BackendError, ManifestClient, NoActiveSessionError
from recipes_client.models import STATUS_PUBLISHED, Recipe, RecipeDraft, User

logger = logging.getLogger(__name__)

SCREEN_LANDING = "landing"
SCREEN_DASHBOARD = "dashboard"

LEVEL_SUCCESS = "success"
LEVEL_ERROR = "error"

LOGIN_FAILED_MESSAGE = "Login failed. Please check your credentials."
CREATE_SUCCEEDED_MESSAGE = "Recipe created successfully!"
CREATE_FAILED_MESSAGE = "Failed to create recipe. Please check the form and try again."

Notifier = Callable[[str, str], None]


def log_notifier(level: str, message: str) -> None:
    """Fallback notifier used when no UI is attached."""
    logger.info("[%s] %s", level, message)


@dataclass
class AppState:
    """Top-level UI state for one browser session."""
    current_user: Optional[User] = None
    recipes: List[Recipe] = field(default_factory=list)
    screen: str = SCREEN_LANDING
    backend_connected: bool = False
    is_loading: bool = True
    initialized: bool = False


class AppShell:
    """
    Orchestrates backend calls and keeps AppState in sync with their outcome.

    Args:
        client: Backend client (a fresh ManifestClient from configuration if omitted)
        state: State to operate on (a fresh AppState if omitted)
        notify: Callback for blocking user-facing alerts
    """

    def __init__(
        self,
        client: Optional[ManifestClient] = None,
        state: Optional[AppState] = None,
        notify: Optional[Notifier] = None,
    ):
        self.client = client or ManifestClient()
        self.state = state or AppState()
        self.notify = notify or log_notifier

    @property
    def visible_screen(self) -> str:
        if self.state.screen == SCREEN_LANDING or self.state.current_user is None:
            return SCREEN_LANDING
        return SCREEN_DASHBOARD

    def probe_and_restore(self) -> None:
        """
        Probe backend connectivity, then try to restore an existing session.

        Runs once per state; later calls are no-ops. A missing session, or any backend
        error while restoring it, leaves the user logged out and is only logged.
        """
        if self.state.initialized:
            return

        logger.info("Initializing application...")
        self.state.is_loading = True
        try:
            result = self.client.check_connection()
            self.state.backend_connected = result.success

            if not result.success:
                logger.error("Backend connection failed: %s", result.error)
                return

            logger.info("Backend connection successful.")
            try:
                user = self.client.me()
            except NoActiveSessionError:
                logger.info("No active user session.")
                self.state.current_user = None
            except BackendError as e:
                logger.warning("Could not restore user session: %s", e)
                self.state.current_user = None
            else:
                self.state.current_user = user
                self.state.screen = SCREEN_DASHBOARD
                logger.info("User is logged in: %s", user.email)
        finally:
            self.state.is_loading = False
            self.state.initialized = True

    def login(self, email: str, password: str) -> bool:
        """
        Log in and switch to the dashboard.

        Returns:
            True on success. On failure an error alert is raised and state is unchanged.
        """
        try:
            self.client.login(email, password)
            user = self.client.me()
        except BackendError as e:
            logger.error("Login failed: %s", e)
            # A token from a login whose user lookup failed must not outlive it.
            self.client.logout()
            self.notify(LEVEL_ERROR, LOGIN_FAILED_MESSAGE)
            return False

        self.state.current_user = user
        self.state.screen = SCREEN_DASHBOARD
        return True

    def logout(self) -> None:
        """End the session and return to the landing screen."""
        self.client.logout()
        self.state.current_user = None
        self.state.recipes = []
        self.state.screen = SCREEN_LANDING
        logger.info("Logged out.")

    def load_recipes(self) -> bool:
        """
        Replace the local recipe list with the published recipes from the backend.

        Returns:
            True on success. On failure the error is logged and the list is left stale.
        """
        try:
            page = self.client.find_recipes()
        except BackendError as e:
            logger.error("Failed to load recipes: %s", e)
            return False

        self.state.recipes = list(page.data)
        logger.info("Loaded %d recipes", len(page.data))
        return True

    def create_recipe(self, data: Dict[str, Any]) -> Optional[Recipe]:
        """
        Create a recipe authored by the current user.

        Args:
            data: Form payload (title, description, ingredients, instructions). `author`
                  defaults to the current user's id and `status` to "published".

        Returns:
            The created record, or None on failure (after an error alert).
        """
        payload = dict(data)
        if payload.get("author") is None and self.state.current_user is not None:
            payload["author"] = self.state.current_user.id
        payload.setdefault("status", STATUS_PUBLISHED)

        try:
            draft = RecipeDraft(**payload)
            recipe = self.client.create_recipe(draft)
        except (BackendError, ValidationError) as e:
            logger.error("Failed to create recipe: %s", e)
            self.notify(LEVEL_ERROR, CREATE_FAILED_MESSAGE)
            return None

        user = self.state.current_user
        if user is not None and recipe.author_name is None and recipe.author_id == user.id:
            recipe.author = user

        if recipe.status == STATUS_PUBLISHED:
            self.state.recipes = [recipe, *self.state.recipes]
        else:
            logger.info("Created recipe %s with status %r; not shown", recipe.id, recipe.status)

        self.notify(LEVEL_SUCCESS, CREATE_SUCCEEDED_MESSAGE)
        return recipe
