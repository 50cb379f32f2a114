"""Shared pytest fixtures for hybridsearch tests."""

import json
import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hybridsearch.embeddings import VectorSynthesizer
from hybridsearch.transport.client import TransportResponse


# ============================================================================
# Auto-mark tests based on directory
# ============================================================================

def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        test_path = str(item.fspath)

        if '/tests/unit/' in test_path or '\\tests\\unit\\' in test_path:
            item.add_marker(pytest.mark.unit)
        elif '/tests/integration/' in test_path or '\\tests\\integration\\' in test_path:
            item.add_marker(pytest.mark.integration)


# ============================================================================
# Response Fixtures
# ============================================================================

@pytest.fixture
def sample_response():
    """Search API response with three hits in backend rank order."""
    return {
        "root": {
            "id": "toplevel",
            "relevance": 1.0,
            "fields": {"totalCount": 3},
            "children": [
                {
                    "id": "id:doc:document::doc1",
                    "relevance": 0.91,
                    "fields": {
                        "id": "doc1",
                        "title": "Introduction to Machine Learning",
                        "content": "Machine learning is a subset of artificial intelligence.",
                        "category": "AI/ML",
                    },
                },
                {
                    "id": "id:doc:document::doc10",
                    "relevance": 0.74,
                    "fields": {
                        "id": "doc10",
                        "title": "Reinforcement Learning Basics",
                        "content": "Agents learn to make decisions by interacting with an environment.",
                        "category": "AI/ML",
                    },
                },
                {
                    "id": "id:doc:document::doc3",
                    "relevance": 0.52,
                    "fields": {
                        "id": "doc3",
                        "title": "Data Science Best Practices",
                        "content": "Data science combines statistics and programming.",
                        "category": "Data Science",
                    },
                },
            ],
        }
    }


@pytest.fixture
def empty_response():
    """Search API response for a query with no matches (Vespa omits children)."""
    return {"root": {"id": "toplevel", "relevance": 1.0, "fields": {"totalCount": 0}}}


# ============================================================================
# Transport Fixtures
# ============================================================================

@pytest.fixture
def mock_transport(sample_response):
    """Mocked Transport returning the sample response with status 200."""
    transport = MagicMock()
    transport.search.return_value = TransportResponse(
        status_code=200,
        body=json.dumps(sample_response),
    )
    return transport


@pytest.fixture
def synthesizer():
    return VectorSynthesizer()


@pytest.fixture
def unit_vector(synthesizer):
    """A 384-float unit vector."""
    return synthesizer.synthesize("machine learning algorithms")


# ============================================================================
# File System Fixtures
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def documents_file(temp_dir):
    """JSON file with two sample documents."""
    path = temp_dir / "docs.json"
    path.write_text(json.dumps([
        {
            "id": "doc1",
            "title": "Introduction to Machine Learning",
            "content": "Machine learning is a subset of artificial intelligence.",
            "category": "AI/ML",
        },
        {
            "id": "doc2",
            "title": "Deep Learning Fundamentals",
            "content": "Deep learning uses neural networks with multiple layers.",
            "category": "AI/ML",
        },
    ]))
    return path


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def clean_env(temp_dir):
    """Provide a clean environment without hybridsearch env vars.

    Points XDG_CONFIG_HOME at an empty temp dir so no user config is read.
    """
    env_vars = ['VESPA_ENDPOINT', 'HYBRIDSEARCH_CONFIG', 'XDG_CONFIG_HOME']
    old_values = {}
    for var in env_vars:
        old_values[var] = os.environ.pop(var, None)
    os.environ['XDG_CONFIG_HOME'] = str(temp_dir / "xdg-config")

    yield

    for var, value in old_values.items():
        if value is not None:
            os.environ[var] = value
        else:
            os.environ.pop(var, None)


# ============================================================================
# CLI Runner Fixture
# ============================================================================

@pytest.fixture
def cli_runner():
    """Provide Click's CliRunner for testing CLI commands."""
    from click.testing import CliRunner
    return CliRunner()
