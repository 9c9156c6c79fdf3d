"""Shared pytest fixtures and configuration for the create-site test suite.

Guidelines
----------
* No network access and no real git or package-manager calls.
* questionary is mocked at the prompter boundary.
* Core tests must be pure — no side effects.
* Filesystem writes only under ``tmp_path``.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from create_site.core.catalog import parse_catalog
from create_site.core.models import Catalogs


@pytest.fixture
def reporter() -> MagicMock:
    """Reporter double recording ``info`` / ``warn`` / ``success`` calls."""
    return MagicMock(spec=["info", "warn", "success"])


@pytest.fixture
def catalogs() -> Catalogs:
    """Small hand-written catalogs with overlapping plugins and options."""
    return Catalogs(
        cms=parse_catalog(
            {
                "gatsby-source-wordpress": {
                    "message": "WordPress",
                    "plugins": ["gatsby-plugin-image", "gatsby-plugin-sharp"],
                },
                "gatsby-source-contentful": {
                    "message": "Contentful",
                    "plugins": ["gatsby-plugin-image"],
                    "options": {"shared": {"x": 1, "y": 2}},
                },
            }
        ),
        styling=parse_catalog(
            {
                "gatsby-plugin-sass": {"message": "Sass", "dependencies": ["sass"]},
                "gatsby-plugin-emotion": {
                    "message": "Emotion",
                    "dependencies": ["@emotion/react", "@emotion/styled"],
                    "options": {"shared": {"from": "styling"}},
                },
            }
        ),
        features=parse_catalog(
            {
                "gatsby-plugin-image": {
                    "message": "Add responsive images",
                    "plugins": [
                        "gatsby-plugin-sharp",
                        "gatsby-transformer-sharp",
                        "gatsby-source-filesystem:images",
                    ],
                    "options": {
                        "gatsby-source-filesystem:images": {
                            "name": "images",
                            "path": "./src/images/",
                        }
                    },
                },
                "gatsby-plugin-react-helmet": {
                    "message": "Add page meta tags with React Helmet",
                    "dependencies": ["react-helmet"],
                },
                "gatsby-plugin-sitemap": {
                    "message": "Add an automatic sitemap",
                    "options": {"shared": {"x": 2}},
                },
            }
        ),
    )
