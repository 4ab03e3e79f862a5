"""
Innochannel Django integration.

Add "innochannel.contrib.django" to INSTALLED_APPS to register
the listeners configured in settings.INNOCHANNEL_EVENTS.
"""
