"""Publishing targets for generated posts."""

from commitpost.publish.base import BasePublisher
from commitpost.publish.exceptions import PublishError
from commitpost.publish.x_publisher import XPublisher

__all__ = [
    "BasePublisher",
    "PublishError",
    "XPublisher",
]
