# -*- coding: utf-8 -*-
"""
tests/modules/projects/facades/test_access_tokens.py

AccessTokenManager: entropía mínima, rotación y resolución.

Autor: OrderTrack
Fecha: 2026-03-07
"""

import pytest

from ordertrack.modules.projects.facades import AccessTokenManager
from ordertrack.modules.projects.facades.errors import ClientLinkNotFound
from ordertrack.modules.projects.models import Project


def test_issue_is_hex_with_min_entropy(db_session):
    tokens = AccessTokenManager(db_session)
    token = tokens.issue()
    assert len(token) == 32
    int(token, 16)


def test_issue_bytes_below_minimum_are_clamped(db_session):
    tokens = AccessTokenManager(db_session, issue_bytes=4, regenerate_bytes=8)
    assert len(tokens.issue()) == 32
    assert tokens.regenerate_bytes == 24


def test_issued_tokens_do_not_repeat(db_session):
    tokens = AccessTokenManager(db_session)
    assert len({tokens.issue() for _ in range(200)}) == 200


def test_regenerate_replaces_token_on_project(db_session):
    tokens = AccessTokenManager(db_session)
    project = Project(title="P", owner_id=1, access_token=tokens.issue())
    previous = project.access_token

    new = tokens.regenerate(project)

    assert new != previous
    assert project.access_token == new
    assert len(new) == 48


def test_revoke_clears_token(db_session):
    tokens = AccessTokenManager(db_session)
    project = Project(title="P", owner_id=1, access_token=tokens.issue())

    tokens.revoke(project)

    assert project.access_token is None


@pytest.mark.asyncio
async def test_resolve_exact_match_only(db_session, project):
    tokens = AccessTokenManager(db_session)

    found = await tokens.resolve(project.access_token)
    assert found.id == project.id

    with pytest.raises(ClientLinkNotFound):
        await tokens.resolve(project.access_token.upper())
    with pytest.raises(ClientLinkNotFound):
        await tokens.resolve(project.access_token[:-1])


@pytest.mark.asyncio
async def test_resolve_empty_token_is_not_found(db_session):
    with pytest.raises(ClientLinkNotFound):
        await AccessTokenManager(db_session).resolve("")

# Fin del archivo tests/modules/projects/facades/test_access_tokens.py
