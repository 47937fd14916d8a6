# File: tests/helpers.py
"""Markup builders shared by the test-suite."""
from bs4 import BeautifulSoup


def make_document(html: str) -> BeautifulSoup:
    """Parse *html* the same way the fetcher does."""
    return BeautifulSoup(html, "html.parser")


def pagination_html(items: int) -> str:
    """Pagination control with *items* <li> entries (prev, pages…, next)."""
    lis = "".join(f'<li><a href="?page={i}">{i}</a></li>' for i in range(items))
    return f'<ul class="pagination list-unstyled">{lis}</ul>'


def profiles_html(*hrefs: str) -> str:
    return "".join(f'<a class="eitem" href="{h}">profile</a>' for h in hrefs)
