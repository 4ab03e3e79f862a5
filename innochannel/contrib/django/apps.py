"""
Innochannel Django — App Configuration
========================================
Wires settings.INNOCHANNEL_EVENTS into the shared event
manager once Django finishes loading.

Add "innochannel.contrib.django" to INSTALLED_APPS.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger("innochannel.django")


class InnochannelEventsConfig(AppConfig):
    name = "innochannel.contrib.django"
    label = "innochannel_events"
    verbose_name = "Innochannel Events"

    def ready(self):
        from innochannel.contrib.django.conf import (
            configure_event_manager,
            get_events_config,
        )
        from innochannel.core.events.manager import get_event_manager

        manager = get_event_manager()
        registered = configure_event_manager(manager, get_events_config())
        logger.info(
            f"Innochannel events configured: {registered} listeners, "
            f"enabled={manager.is_enabled()}"
        )
