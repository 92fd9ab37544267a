"""Factory Boy helpers building account records for store and service tests."""

from __future__ import annotations

import factory


class BaseFactory(factory.Factory):
    """Base class for plain (non-ORM) record factories."""

    class Meta:
        abstract = True
