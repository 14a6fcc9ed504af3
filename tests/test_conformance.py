"""Tests for bundle conformance against the reference bundle.

Covers:
- The shipped zh bundle is a faithful peer of en
- Shape problems: missing/extra keys, blank values, section/leaf mix-ups
- Placeholder, plural and markup drift at individual keys
"""

import pytest

from musicat_i18n.conformance import (
    ConformanceReport,
    IssueCode,
    Severity,
    assert_conformant,
    check_bundle,
    check_locale,
)
from musicat_i18n.errors import ConformanceError
from musicat_i18n.keys import key_paths

TOOLTIP = "trackInfo.artworkTooltipBody"


def _check(bundle, en_bundle) -> ConformanceReport:
    return check_bundle(bundle, en_bundle, locale="zh", reference_locale="en")


def _codes(report: ConformanceReport) -> list[tuple[str, IssueCode]]:
    return [(i.key_path, i.code) for i in report.issues]


# =============================================================================
# Shipped bundles
# =============================================================================


class TestShippedBundles:
    def test_zh_conforms_to_en(self) -> None:
        report = check_locale("zh")
        assert report.issues == []
        assert report.ok
        assert report.passed(strict=True)
        assert report.locale == "zh"
        assert report.reference_locale == "en"

    def test_every_reference_key_has_a_non_empty_translation(self, en_bundle, zh_bundle) -> None:
        assert key_paths(zh_bundle) == key_paths(en_bundle)
        report = _check(zh_bundle, en_bundle)
        assert report.checked_keys == len(key_paths(en_bundle))

    def test_reference_conforms_to_itself(self) -> None:
        assert check_locale("en", "en").ok

    def test_folder_keeps_one_plural_block(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "settings.folder", "文件夹")
        report = _check(zh_copy, en_bundle)
        (issue,) = report.issues
        assert issue.code is IssueCode.PLURAL_MISMATCH
        assert issue.key_path == "settings.folder"
        assert issue.message == "Expected 1 plural block(s), found 0"
        assert issue.reference == "{{1 folder | ?? folders}}"

    def test_tooltip_stays_balanced_markup(self, zh_copy, en_bundle, set_path) -> None:
        body = zh_copy["trackInfo"]["artworkTooltipBody"].replace("</h3>", "")
        set_path(zh_copy, TOOLTIP, body)
        report = _check(zh_copy, en_bundle)
        assert _codes(report) == [(TOOLTIP, IssueCode.UNBALANCED_MARKUP)]
        assert "Unclosed tag <h3>" in report.issues[0].message


# =============================================================================
# Shape
# =============================================================================


class TestShape:
    def test_missing_key(self, zh_copy, en_bundle, delete_path) -> None:
        delete_path(zh_copy, "sidebar.search")
        report = _check(zh_copy, en_bundle)
        (issue,) = report.issues
        assert issue.code is IssueCode.MISSING_KEY
        assert issue.key_path == "sidebar.search"
        assert issue.reference == "Search"
        assert not report.ok

    def test_missing_section_lists_every_leaf(self, zh_copy, en_bundle) -> None:
        del zh_copy["wiki"]
        report = _check(zh_copy, en_bundle)
        assert [i.key_path for i in report.by_code(IssueCode.MISSING_KEY)] == [
            "wiki.inArticle",
            "wiki.clickHint",
            "wiki.albums",
            "wiki.songs",
            "wiki.artists",
        ]
        assert len(report.issues) == 5

    def test_extra_key(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "sidebar.podcasts", "播客")
        report = _check(zh_copy, en_bundle)
        assert _codes(report) == [("sidebar.podcasts", IssueCode.EXTRA_KEY)]

    def test_extra_section_lists_every_leaf(self, zh_copy, en_bundle) -> None:
        zh_copy["radio"] = {"title": "电台", "stations": {"all": "全部"}}
        report = _check(zh_copy, en_bundle)
        assert _codes(report) == [
            ("radio.title", IssueCode.EXTRA_KEY),
            ("radio.stations.all", IssueCode.EXTRA_KEY),
        ]

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_value(self, zh_copy, en_bundle, set_path, value) -> None:
        set_path(zh_copy, "tagCloud.close", value)
        report = _check(zh_copy, en_bundle)
        (issue,) = report.issues
        assert issue.code is IssueCode.EMPTY_VALUE
        assert issue.reference == "Clear all tags"
        assert issue.translation == value

    def test_section_replaced_by_string(self, zh_copy, en_bundle) -> None:
        zh_copy["sidebar"] = "侧边栏"
        report = _check(zh_copy, en_bundle)
        (issue,) = report.issues
        assert issue.code is IssueCode.SHAPE_MISMATCH
        assert issue.key_path == "sidebar"
        assert issue.message == "Expected a section, got str"

    def test_leaf_replaced_by_section(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "library.fields.title", {"short": "名"})
        report = _check(zh_copy, en_bundle)
        (issue,) = report.issues
        assert issue.code is IssueCode.SHAPE_MISMATCH
        assert issue.key_path == "library.fields.title"
        assert issue.message == "Expected a string, got dict"


# =============================================================================
# Placeholders
# =============================================================================


class TestPlaceholders:
    KEY = "smartPlaylists.builder.parts.titleContains.title"

    def test_renamed_placeholder(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, self.KEY, "歌名包含 {keyword}")
        (issue,) = _check(zh_copy, en_bundle).issues
        assert issue.code is IssueCode.PLACEHOLDER_MISMATCH
        assert issue.message == "Placeholders differ: missing {text}; unexpected {keyword}"

    def test_dropped_placeholder(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, self.KEY, "歌名包含")
        (issue,) = _check(zh_copy, en_bundle).issues
        assert issue.message == "Placeholders differ: missing {text}"

    def test_reordered_placeholder_is_fine(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, self.KEY, "{text} 在歌名中")
        assert _check(zh_copy, en_bundle).issues == []

    def test_malformed_placeholder(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, self.KEY, "歌名包含 {text")
        (issue,) = _check(zh_copy, en_bundle).issues
        assert issue.code is IssueCode.MALFORMED_PLACEHOLDER
        assert issue.message == "Unclosed placeholder at position 5"

    def test_extra_plural_block(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "settings.folder", "{{1 个文件夹}} {{?? 个文件夹}}")
        (issue,) = _check(zh_copy, en_bundle).issues
        assert issue.code is IssueCode.PLURAL_MISMATCH
        assert issue.message == "Expected 1 plural block(s), found 2"

    def test_plural_bound_to_other_argument(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "settings.folder", "{{n:?? 个文件夹}}")
        (issue,) = _check(zh_copy, en_bundle).issues
        assert issue.message == "Plural blocks are bound to different arguments"

    def test_chinese_single_plural_form_is_fine(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "settings.folder", "{{?? 个文件夹}}")
        assert _check(zh_copy, en_bundle).issues == []


# =============================================================================
# Markup
# =============================================================================


class TestMarkup:
    def test_markup_at_untrusted_key(self, zh_copy, en_bundle, set_path) -> None:
        set_path(zh_copy, "sidebar.search", "<b>搜索</b>")
        report = _check(zh_copy, en_bundle)
        assert _codes(report) == [
            ("sidebar.search", IssueCode.UNTRUSTED_MARKUP),
            ("sidebar.search", IssueCode.MARKUP_TAGS_DIFFER),
        ]
        assert report.issues[0].severity is Severity.ERROR
        assert report.issues[1].severity is Severity.WARNING

    def test_dropped_tags_are_a_warning(self, zh_copy, en_bundle, set_path) -> None:
        body = zh_copy["trackInfo"]["artworkTooltipBody"].replace("<i>", "").replace("</i>", "")
        set_path(zh_copy, TOOLTIP, body)
        report = _check(zh_copy, en_bundle)
        assert _codes(report) == [(TOOLTIP, IssueCode.MARKUP_TAGS_DIFFER)]
        assert report.ok
        assert report.passed() is True
        assert report.passed(strict=True) is False

    def test_custom_trusted_keys(self, zh_copy, en_bundle) -> None:
        report = check_bundle(zh_copy, en_bundle, locale="zh", trusted_keys=())
        assert (TOOLTIP, IssueCode.UNTRUSTED_MARKUP) in _codes(report)


# =============================================================================
# Reporting
# =============================================================================


class TestReport:
    def test_assert_conformant_raises_with_report(self, zh_copy, en_bundle, delete_path) -> None:
        delete_path(zh_copy, "sidebar.map")
        with pytest.raises(ConformanceError, match="Locale zh failed conformance") as exc:
            assert_conformant(zh_copy, en_bundle, locale="zh")
        assert exc.value.report.by_code(IssueCode.MISSING_KEY)[0].key_path == "sidebar.map"

    def test_assert_conformant_strict(self, zh_copy, en_bundle, set_path) -> None:
        body = zh_copy["trackInfo"]["artworkTooltipBody"].replace("<i>", "").replace("</i>", "")
        set_path(zh_copy, TOOLTIP, body)
        assert assert_conformant(zh_copy, en_bundle, locale="zh").ok
        with pytest.raises(ConformanceError):
            assert_conformant(zh_copy, en_bundle, locale="zh", strict=True)

    def test_to_dict(self, zh_copy, en_bundle, delete_path) -> None:
        delete_path(zh_copy, "sidebar.map")
        data = _check(zh_copy, en_bundle).to_dict()
        assert data["locale"] == "zh"
        assert data["ok"] is False
        assert data["issues"][0] == {
            "code": "missing_key",
            "key_path": "sidebar.map",
            "message": "Key is missing from the translation",
            "reference": "Map",
            "translation": None,
            "severity": "error",
        }
