"""octocatalog -- Slack external-select options responder.

Serves statically configured option lists to Slack's options-load
requests, filtered by the user's typed query::

    from octocatalog.app import create_app
"""

__version__ = "0.1.0"
