"""Repository – LoggingStateRepository.

Logs every state change before it is written to the wrapped repository::

    repository = LoggingStateRepository(InMemoryStateRepository())
    repository.set_feature_state(FeatureState("CHECKOUT_V2", enabled=True))
    # info: Setting Feature "CHECKOUT_V2" to "enabled"

A custom template marks the feature id as ``{1}`` and the new state
(``enabled`` / ``disabled``) as ``{2}``::

    LoggingStateRepository(backend, template="Flag {1} is now {2}")
"""
from __future__ import annotations

from togglekit.features.state import FeatureState
from togglekit.observability.logging import Logger, get_logger
from togglekit.repository.delegating import DelegatingStateRepository
from togglekit.repository.port import StateRepository

FEATURE_PLACEHOLDER = "{1}"
STATE_PLACEHOLDER = "{2}"


def readable_state(state: FeatureState) -> str:
    return "enabled" if state.enabled else "disabled"


class LoggingStateRepository(DelegatingStateRepository):
    """Decorator emitting an INFO message for every ``set_feature_state``.

    Reads are not logged.  The message is emitted before the delegate write,
    so a failed write still leaves its log line behind.  A failing logger
    never prevents the write; delegate failures propagate unchanged.

    Parameters
    ----------
    delegate:
        Repository receiving the actual reads and writes.
    template:
        Optional message template with ``{1}`` / ``{2}`` placeholders.
        Unknown placeholders are left as they are.
    logger:
        Logging sink; defaults to the ``togglekit.repository`` structlog logger.
    """

    def __init__(
        self,
        delegate: StateRepository,
        template: str | None = None,
        logger: Logger | None = None,
    ) -> None:
        super().__init__(delegate)
        self._template = template
        self._log = logger if logger is not None else get_logger("togglekit.repository")

    @property
    def template(self) -> str | None:
        return self._template

    def render_message(self, state: FeatureState) -> str:
        if self._template is None:
            return f'Setting Feature "{state.feature_id}" to "{readable_state(state)}"'
        return self._template.replace(FEATURE_PLACEHOLDER, str(state.feature_id)).replace(
            STATE_PLACEHOLDER, readable_state(state)
        )

    def set_feature_state(self, state: FeatureState) -> None:
        message = self.render_message(state)
        try:
            self._log.info(message)
        except Exception:  # noqa: BLE001 – logging must not block the write
            pass
        self._delegate.set_feature_state(state)


__all__ = ["LoggingStateRepository", "readable_state"]
