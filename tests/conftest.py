"""Shared test fixtures for termfolio."""

from pathlib import Path

import pytest

from termfolio.data.parser import parse
from termfolio.processor.formatter import DisplayPortfolio, project


@pytest.fixture
def sample_yaml() -> str:
    """A portfolio document shaped like a Jekyll _config.yml."""
    return """\
title: Backend Developer
name: Pokey
email: pokey@example.com
website: pokey.is-a.dev
github_username: pokeylooted
discord_username: pokey#0001
theme: jekyll-theme-minimal
about: |-
  I build things with <mark>FastAPI</mark> and <mark>Eating Pizza</mark>.
  ![me](/assets/me.png "Me")

  Second paragraph.
additional_links:
  - title: Blog
    icon: fas fa-rss
    url: https://blog.example.com
content:
  - title: Projects
    layout: list
    content:
      - title: Duck Tracker
        sub_title: Rust, ratatui
        description: Tracks ducks in the <mark>terminal</mark>.
        url: https://github.com/pokeylooted/duck-tracker
        additional_links:
          - title: Demo
            url: https://demo.example.com
      - quote: Quack.
      - caption: Only a caption
  - title: Resume
    layout: text
    content: Worked on many things over the years.
  - title: Experience
    layout: list
"""


@pytest.fixture
def sample_portfolio(sample_yaml: str) -> DisplayPortfolio:
    """The sample document parsed and projected at width 80."""
    return project(parse(sample_yaml), 80)


@pytest.fixture
def sample_file(tmp_path: Path, sample_yaml: str) -> Path:
    """The sample document written to a temporary _config.yml."""
    path = tmp_path / "_config.yml"
    path.write_text(sample_yaml, encoding="utf-8")
    return path
