"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from revalidator.documents.blocks import BlockIndex, BlockSpan
from revalidator.editor.history import EditLog, ReplaceMapping


@pytest.fixture
def paragraphs() -> BlockIndex:
    # "Hello there" | "General Kenobi" | "You are a bold one"
    return BlockIndex([BlockSpan(1, 11), BlockSpan(14, 14), BlockSpan(30, 18)])


@pytest.fixture
def edit_log() -> EditLog:
    log = EditLog()
    log.record(lambda position: position, time=100)
    log.record(ReplaceMapping.insertion(5, 3), time=200)
    log.record(ReplaceMapping.deletion(0, 2), time=300)
    return log
