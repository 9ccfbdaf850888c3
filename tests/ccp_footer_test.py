# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for ccparser footer classification."""

from __future__ import annotations

import pytest
from ccparser import (
    Footer,
    extract_references,
    is_footer_paragraph,
    parse_footer_paragraph,
    revert_footer,
    split_to_lines,
)

# (first line, is footer, expected record)
_CASES: list[tuple[str, bool, Footer]] = [
    ('hello world', False, Footer(title='hello world')),
    ('helloworld', False, Footer(title='helloworld')),
    ('Refs: #2', True, Footer(tag='Refs', title='#2')),
    ('Refs-With: #2', True, Footer(tag='Refs-With', title='#2')),
    ('Refs-With-User: #2', True, Footer(tag='Refs-With-User', title='#2')),
    ('Close #1, #2', True, Footer(tag='Close', title='#1, #2')),
    ('#Close #1, #2', False, Footer(title='#Close #1, #2')),
    ('Close 1, #2', False, Footer(title='Close 1, #2')),
    (
        'BREAKING CHANGE: this is a breaking change',
        True,
        Footer(tag='BREAKING CHANGE', title='this is a breaking change'),
    ),
    (
        'BREAKING CHANGES: this is a breaking change',
        False,
        Footer(title='BREAKING CHANGES: this is a breaking change'),
    ),
]


class TestIsFooterParagraph:
    """Tests for is_footer_paragraph()."""

    @pytest.mark.parametrize(('line', 'want'), [(c[0], c[1]) for c in _CASES])
    def test_table(self, line: str, want: bool) -> None:
        """Test footer detection from the reference table."""
        assert is_footer_paragraph(line) is want

    def test_empty_line(self) -> None:
        """Test an empty line is not a footer."""
        assert is_footer_paragraph('') is False

    def test_lowercase_breaking_change_is_not_breaking(self) -> None:
        """Test 'breaking change:' is not the special token."""
        # Space in the token rules out the generic tag pattern too.
        assert is_footer_paragraph('breaking change: x') is False


class TestParseFooterParagraph:
    """Tests for parse_footer_paragraph()."""

    @pytest.mark.parametrize(('line', 'want'), [(c[0], c[2]) for c in _CASES])
    def test_table(self, line: str, want: Footer) -> None:
        """Test classification from the reference table."""
        assert parse_footer_paragraph(line) == want

    def test_closes_list(self) -> None:
        """Test reference list footer."""
        assert parse_footer_paragraph('Closes #1, #2') == Footer(tag='Closes', title='#1, #2')

    def test_breaking_change(self) -> None:
        """Test BREAKING CHANGE footer."""
        assert parse_footer_paragraph('BREAKING CHANGE: drop X') == Footer(tag='BREAKING CHANGE', title='drop X')

    def test_breaking_changes_plural_rejected(self) -> None:
        """Test the plural spelling falls through to the fallback."""
        assert parse_footer_paragraph('BREAKING CHANGES: drop X') == Footer(title='BREAKING CHANGES: drop X')

    def test_breaking_change_empty_title(self) -> None:
        """Test BREAKING CHANGE with nothing after the colon."""
        assert parse_footer_paragraph('BREAKING CHANGE:') == Footer(tag='BREAKING CHANGE', title='')

    def test_tag_case_preserved(self) -> None:
        """Test tags match any casing and keep it."""
        assert parse_footer_paragraph('REVIEWED-BY: Z').tag == 'REVIEWED-BY'

    def test_tag_without_space(self) -> None:
        """Test whitespace after the colon is optional."""
        assert parse_footer_paragraph('Refs:#2') == Footer(tag='Refs', title='#2')

    def test_title_trimmed(self) -> None:
        """Test tagged titles are trimmed."""
        assert parse_footer_paragraph('Reviewed-by:   Z  ').title == 'Z'

    def test_double_hyphen_not_a_tag(self) -> None:
        """Test tokens may not contain consecutive hyphens."""
        assert parse_footer_paragraph('Refs--With: #2').tag == ''

    def test_reference_list_space_separated(self) -> None:
        """Test references separated by spaces only."""
        assert parse_footer_paragraph('Fixes #1 #2') == Footer(tag='Fixes', title='#1 #2')

    def test_reference_list_normalised(self) -> None:
        """Test whitespace around commas is normalised."""
        f = parse_footer_paragraph('Closes   #1 ,#2,   #3  ')
        assert f.tag == 'Closes'
        assert f.title == '#1, #2, #3'

    def test_single_letter_label_rejected(self) -> None:
        """Test a one-letter label is not a reference list."""
        assert parse_footer_paragraph('C #1').tag == ''

    def test_non_ascii_digits_rejected(self) -> None:
        """Test references need ASCII digits."""
        assert not is_footer_paragraph('Closes #\u0661\u0662')
        assert parse_footer_paragraph('Closes #\u0661\u0662') == Footer(title='Closes #\u0661\u0662')

    def test_non_ascii_tag_rejected(self) -> None:
        """Test a Kelvin sign does not pass for the letter k."""
        assert not is_footer_paragraph('\u212aey: x')
        assert parse_footer_paragraph('\u212aey: x').tag == ''

    def test_content(self) -> None:
        """Test lines after the first become the content."""
        f = parse_footer_paragraph("BREAKING CHANGE: rename\n\n'''diff\n- tag:0~tag:1\n+ @0~@1\n'''")
        assert f.tag == 'BREAKING CHANGE'
        assert f.title == 'rename'
        assert f.content == "'''diff\n- tag:0~tag:1\n+ @0~@1\n'''"

    def test_content_keeps_inner_blank_lines_and_indent(self) -> None:
        """Test only leading and trailing blank lines are dropped."""
        f = parse_footer_paragraph('Note: x\n\n    indented\n\nafter\n\n')
        assert f.content == '    indented\n\nafter'

    def test_content_crlf(self) -> None:
        """Test CRLF paragraphs are split the same way."""
        f = parse_footer_paragraph('Refs: #1\r\nmore')
        assert f == Footer(tag='Refs', title='#1', content='more')

    def test_fallback_keeps_content(self) -> None:
        """Test unrecognised paragraphs still carry their content."""
        f = parse_footer_paragraph('before\n\ncode')
        assert f == Footer(tag='', title='before', content='code')

    def test_idempotent(self) -> None:
        """Test parsing twice yields identical records."""
        text = 'Reviewed-by: Z\nsecond line'
        assert parse_footer_paragraph(text) == parse_footer_paragraph(text)


class TestExtractReferences:
    """Tests for extract_references()."""

    def test_in_order(self) -> None:
        """Test tokens are returned in order of appearance."""
        assert extract_references('#3, #1 and #20') == ['#3', '#1', '#20']

    def test_none(self) -> None:
        """Test text without references."""
        assert extract_references('no refs # here') == []

    def test_ascii_digits_only(self) -> None:
        """Test non-ASCII digits are not references."""
        assert extract_references('#\u0661\u0662 and #\uff11 but #7') == ['#7']


class TestRevertFooter:
    """Tests for revert_footer()."""

    def test_github_revert(self) -> None:
        """Test GitHub's default revert header and sha line."""
        f = revert_footer('Revert "feat: x"', 'This reverts commit bf08694.\n\nmore')
        assert f == Footer(tag='revert', title='feat: x', content='bf08694')

    def test_title_matches_header_subject(self) -> None:
        """Test the footer title is the header subject."""
        f = revert_footer("REVERT 'x' \t", 'This reverts commit abc.')
        assert f == Footer(tag='revert', title='x', content='abc')

    @pytest.mark.parametrize(
        ('header', 'body'),
        [
            ('Revert x', 'This reverts commit abc.'),
            ('Revert "x"', ''),
            ('Revert "x"', 'This reverts commit xyz.'),
            ('Revert "x"', 'Context first.\nThis reverts commit abc.'),
            ('feat: x', 'This reverts commit abc.'),
        ],
    )
    def test_no_footer(self, header: str, body: str) -> None:
        """Test messages that are not GitHub reverts."""
        assert revert_footer(header, body) is None


class TestSplitToLines:
    """Tests for split_to_lines()."""

    def test_single_line(self) -> None:
        """Test single line."""
        assert split_to_lines('single line') == ['single line']

    def test_multiple_lines(self) -> None:
        """Test LF line endings."""
        assert split_to_lines('line1\nline2') == ['line1', 'line2']

    def test_crlf(self) -> None:
        """Test CRLF line endings."""
        assert split_to_lines('line1\r\nline2') == ['line1', 'line2']

    def test_other_separators_kept(self) -> None:
        """Test form feeds and Unicode separators do not split lines."""
        assert split_to_lines('a\x0cb c') == ['a\x0cb c']
