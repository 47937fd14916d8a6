# File: tests/test_link_extractor.py
from profile_scout.crawler.link_extractor import extract_profile_links
from tests.helpers import make_document, profiles_html

SOURCE = "http://example.com/city/springfield"


def test_extracts_in_document_order_without_dedup():
    doc = make_document(
        "<div>" + profiles_html("/p/3", "/p/1") + "<span>x</span>" + profiles_html("/p/3") + "</div>"
    )
    assert extract_profile_links(doc, SOURCE) == ["/p/3", "/p/1", "/p/3"]


def test_ignores_other_anchors_and_empty_values():
    html = (
        '<a href="/about">About</a>'
        '<a class="eitem">no href</a>'
        '<a class="eitem" href="   ">blank</a>'
        '<a class="eitem" href="">empty</a>'
        '<a class="eitem featured" href="/p/9">other class</a>'
        '<a class="eitem" href="https://example.com/p/5">ok</a>'
    )
    assert extract_profile_links(make_document(html), SOURCE) == ["https://example.com/p/5"]


def test_blank_hrefs_are_not_reported_as_missing_profiles(project_log):
    doc = make_document('<a class="eitem" href=" ">blank</a><a class="eitem" href="">empty</a>')
    assert extract_profile_links(doc, SOURCE) == []
    assert not any("No user profiles found" in r.getMessage() for r in project_log.records)


def test_relative_links_are_returned_raw():
    doc = make_document(profiles_html("p/7", "../p/8"))
    assert extract_profile_links(doc, SOURCE) == ["p/7", "../p/8"]


def test_no_matches_is_logged_not_raised(project_log):
    doc = make_document("<html><body><a href='/x'>x</a></body></html>")
    assert extract_profile_links(doc, SOURCE) == []
    assert any("No user profiles found" in r.getMessage() and SOURCE in r.getMessage()
               for r in project_log.records)


def test_extraction_is_repeatable():
    doc = make_document(profiles_html("/p/1", "/p/2", "/p/1"))
    first = extract_profile_links(doc, SOURCE)
    assert all(extract_profile_links(doc, SOURCE) == first for _ in range(3))
