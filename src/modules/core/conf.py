"""Engine settings.

Read from Django settings (``PRINTSYNC_*``) when a settings module is
available, otherwise the defaults apply, so the engines also run
embedded in a plain Python process.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from modules.orders.constants import DEFAULT_ORDER_NUMBER_PREFIX, TransitionPolicy


class EngineSettings(BaseModel):
    """Immutable engine configuration."""

    model_config = ConfigDict(frozen=True)

    transition_policy: TransitionPolicy = TransitionPolicy.STRICT
    order_number_prefix: str = DEFAULT_ORDER_NUMBER_PREFIX
    seed_demo_data: bool = False
    default_college: str = "CBIT"

    @classmethod
    def from_django(cls) -> EngineSettings:
        """Build from Django settings, loading the settings module on first access.

        Only a missing settings module falls back to the defaults.
        """
        from django.conf import settings
        from django.core.exceptions import ImproperlyConfigured

        defaults = cls()
        try:
            return cls(
                transition_policy=getattr(
                    settings, "PRINTSYNC_TRANSITION_POLICY", defaults.transition_policy
                ),
                order_number_prefix=getattr(
                    settings, "PRINTSYNC_ORDER_NUMBER_PREFIX", defaults.order_number_prefix
                ),
                seed_demo_data=getattr(
                    settings, "PRINTSYNC_SEED_DEMO_DATA", defaults.seed_demo_data
                ),
                default_college=getattr(
                    settings, "PRINTSYNC_DEFAULT_COLLEGE", defaults.default_college
                ),
            )
        except ImproperlyConfigured:
            return defaults
