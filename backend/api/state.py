"""
Shared API state - the content measurer used by all layout routes.
Initialized by main.py; measurers are stateless apart from caches, so one instance serves every request.
"""

from typing import Optional

from layout import ContentMeasurer

# Set by main.py
measurer: Optional[ContentMeasurer] = None


def init_api_state(measurer_instance: ContentMeasurer):
    global measurer
    measurer = measurer_instance
