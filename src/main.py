"""Entry points for a presentation layer hosting access key editors."""

from src.core.context import EditingSessionContext
from src.modules.access_keys.collaborators import AccessKeyStore, CompletionCallback
from src.modules.access_keys.controller import AccessKeyDraftController
from src.utils.logger import setup_logging
from src.utils.settings.app import AppSettings


def bootstrap(settings: AppSettings | None = None):
    """Configure logging for the hosting process."""
    settings = settings or AppSettings()
    logger = setup_logging(settings.is_production, debug=settings.DEBUG)
    logger.info(
        "Access key admin ready",
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )
    return logger


def create_session(
    store: AccessKeyStore,
    context: EditingSessionContext,
    on_complete: CompletionCallback | None = None,
) -> AccessKeyDraftController:
    """Open an editing session for a new or existing access key."""
    controller = AccessKeyDraftController(store, on_complete=on_complete)
    controller.open(context)
    return controller
