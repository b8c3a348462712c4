"""Shared fixtures for core unit tests"""

import pytest

from octopub.config import FieldDefaults, Settings
from octopub.core.export import make_renderer
from octopub.core.models import ExportOptions
from octopub.core.render import Renderer


SAMPLE_MD = """\
---
title: Hello *World*
date: 2023-05-01
categories: blog notes
tags: [python, org]
published: false
with-toc: 2
---
# Intro

Some text[^1].

## Details

```python
print(1)
```

[^1]: A note.
"""


@pytest.fixture(name="defaults")
def defaults_fixture():
    return FieldDefaults()


@pytest.fixture(name="renderer")
def renderer_fixture():
    """Plain renderer without octopress hooks."""
    return Renderer()


@pytest.fixture(name="octo_renderer")
def octo_renderer_fixture():
    return make_renderer(Settings())


@pytest.fixture(name="make_info")
def make_info_fixture(renderer):
    """Build DocumentInfo from front-matter style keyword arguments."""
    def _make(**frontmatter):
        return renderer.info(ExportOptions.from_frontmatter(frontmatter))
    return _make


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
