from datetime import datetime

from throttle_timer.core.config import settings


def now() -> datetime:
    """Timezone-aware now based on configured timezone."""
    return datetime.now(settings.tzinfo)
