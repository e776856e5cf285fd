#!/usr/bin/env python3
"""Tests for Status enum."""
import pytest

from models import Status


class TestStatus:
    """Tests for Status enum ordering and tokens."""

    def test_urgency_ordering(self):
        """Lower value = more urgent."""
        assert Status.OVERDUE.value < Status.DUE.value
        assert Status.DUE.value < Status.GOOD.value

    def test_tokens(self):
        """Tokens are the serialized vocabulary."""
        assert Status.GOOD.token == "good"
        assert Status.DUE.token == "due"
        assert Status.OVERDUE.token == "overdue"

    def test_from_token(self):
        assert Status.from_token("overdue") == Status.OVERDUE
        assert Status.from_token("Due") == Status.DUE
        assert Status.from_token(" good ") == Status.GOOD

    def test_from_token_unknown_raises(self):
        with pytest.raises(ValueError):
            Status.from_token("due_soon")
