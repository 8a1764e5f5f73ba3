"""
Tests for loading generated trait.impl fragments.
"""

import json
import pytest

from core.fragment_loader import (
    FragmentFormatError, discover_fragments, load_fragment, parse_fragment, trait_path_for
)
from tests import SampleData

HEADER = "(function() {\n    var implementors = Object.fromEntries(["
FOOTER = (
    ");\n    if (window.register_implementors) {\n"
    "        window.register_implementors(implementors);\n"
    "    } else {\n        window.pending_implementors = implementors;\n    }\n})()\n"
)


def generated_lengths(pieces):
    """Byte lengths as rustdoc records them: later pieces include their leading comma."""
    return [len(p.encode("utf-8")) + (1 if index else 0) for index, p in enumerate(pieces)]


def make_fragment(pairs, start=None, lengths=None, with_metadata=True):
    """Build fragment source in the generated layout."""
    pieces = [json.dumps(pair, separators=(",", ":"), ensure_ascii=False) for pair in pairs]
    text = HEADER + ",".join(pieces) + "]" + FOOTER
    if with_metadata:
        metadata = {
            "start": len(HEADER.encode("utf-8")) if start is None else start,
            "fragment_lengths": generated_lengths(pieces) if lengths is None else lengths,
        }
        text += "//" + json.dumps(metadata, separators=(",", ":"))
    return text


class TestLoadShippedFragment:
    """Test the std::io::Read fragment shipped with the tests."""

    @pytest.fixture
    def fragment(self):
        return load_fragment(SampleData.read_fragment_path(), root=SampleData.fragment_root())

    def test_trait_path(self, fragment):
        assert fragment.trait_path == "std/io/trait.Read"

    def test_groups_in_file_order(self, fragment):
        assert list(fragment.table) == ["bytes", "openssl"]
        assert fragment.entry_count == 2

    def test_entries_untouched(self, fragment):
        entry = fragment.table["bytes"][0]
        assert isinstance(entry, list)
        assert entry[0].startswith("impl&lt;B: ")
        assert 'href="bytes/buf/struct.Reader.html"' in entry[0]

    def test_metadata(self, fragment):
        assert fragment.metadata.start == 57
        assert fragment.metadata.fragment_lengths == [502, 538]

    def test_second_piece_starts_with_comma(self):
        data = SampleData.read_fragment_path().read_bytes()
        assert data[56:57] == b"["
        assert data[57:67] == b'["bytes",['
        assert data[559:571] == b',["openssl",'
        assert data[1097:1100] == b"]);"

    def test_without_root_uses_stem(self):
        fragment = load_fragment(SampleData.read_fragment_path())
        assert fragment.trait_path == "trait.Read"


class TestParseFragment:
    """Test decoding fragment source."""

    def test_layout_matches_pieces(self):
        text = make_fragment([["alpha", [["a1"], ["a2"]]], ["beta", [["b1"]]]])
        fragment = parse_fragment(text, "core/trait.Demo")

        assert fragment.table == {"alpha": [["a1"], ["a2"]], "beta": [["b1"]]}
        assert fragment.metadata.fragment_lengths == [
            len('["alpha",[["a1"],["a2"]]]'), len(',["beta",[["b1"]]]')
        ]

    def test_lengths_without_commas_rejected(self):
        pairs = [["alpha", [["a1"]]], ["beta", [["b1"]]], ["gamma", []]]
        lengths = [len(json.dumps(p, separators=(",", ":"))) for p in pairs]
        with pytest.raises(FragmentFormatError):
            parse_fragment(make_fragment(pairs, lengths=lengths), "t")

    def test_table_must_close_after_last_piece(self):
        pairs = [["alpha", [["a1"]]]]
        lengths = [len('["alpha",[["a1"]]]') - 1]
        with pytest.raises(FragmentFormatError):
            parse_fragment(make_fragment(pairs, lengths=lengths), "t")

    def test_non_ascii_lengths_are_bytes(self):
        text = make_fragment([["ünïcode", [["impl Read for Ω"]]]])
        fragment = parse_fragment(text, "core/trait.Demo")
        assert fragment.table["ünïcode"] == [["impl Read for Ω"]]

    def test_empty_table(self):
        fragment = parse_fragment(make_fragment([], lengths=[]), "core/trait.Demo")
        assert fragment.table == {}
        assert fragment.entry_count == 0

    def test_metadata_optional(self):
        fragment = parse_fragment(make_fragment([["alpha", [["a1"]]]], with_metadata=False), "t")
        assert fragment.metadata is None
        assert fragment.table == {"alpha": [["a1"]]}

    def test_missing_table(self):
        with pytest.raises(FragmentFormatError, match="No Object.fromEntries"):
            parse_fragment("var implementors = {};", "t")

    def test_invalid_json(self):
        text = HEADER + '["alpha",[["a1"]]' + FOOTER
        with pytest.raises(FragmentFormatError):
            parse_fragment(text, "t")

    def test_malformed_pair(self):
        with pytest.raises(FragmentFormatError, match="Malformed"):
            parse_fragment(make_fragment([["alpha", "not a list"]]), "t")

    def test_duplicate_group(self):
        with pytest.raises(FragmentFormatError, match="Duplicate group key: alpha"):
            parse_fragment(make_fragment([["alpha", []], ["alpha", []]]), "t")

    def test_wrong_start(self):
        text = make_fragment([["alpha", [["a1"]]]], start=12)
        with pytest.raises(FragmentFormatError, match="does not match table offset"):
            parse_fragment(text, "t")

    def test_wrong_fragment_count(self):
        text = make_fragment([["alpha", [["a1"]]]], lengths=[10, 20])
        with pytest.raises(FragmentFormatError, match="2 fragments for 1 groups"):
            parse_fragment(text, "t")

    def test_wrong_fragment_length(self):
        text = make_fragment([["alpha", [["a1"]]], ["beta", []]], lengths=[5, 11])
        with pytest.raises(FragmentFormatError):
            parse_fragment(text, "t")

    def test_incomplete_metadata(self):
        text = make_fragment([["alpha", []]], with_metadata=False) + '//{"start":57}'
        with pytest.raises(FragmentFormatError, match="Incomplete metadata"):
            parse_fragment(text, "t")


class TestFragmentFiles:
    """Test fragment discovery and file errors."""

    def test_discover(self):
        paths = discover_fragments(SampleData.fragment_root())
        assert paths == [SampleData.read_fragment_path()]

    def test_discover_missing_root(self, tmp_path):
        assert discover_fragments(tmp_path / "missing") == []

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(FragmentFormatError, match="Cannot read fragment"):
            load_fragment(tmp_path / "trait.Missing.js")

    def test_trait_path_outside_root(self, tmp_path):
        assert trait_path_for(tmp_path / "trait.Read.js", root="/elsewhere") == "trait.Read"

    def test_load_from_disk(self, tmp_path):
        root = tmp_path / "trait.impl"
        path = root / "core" / "fmt" / "trait.Debug.js"
        path.parent.mkdir(parents=True)
        path.write_text(make_fragment([["alpha", [["a1"]]]]), encoding="utf-8")

        fragment = load_fragment(path, root=root)

        assert fragment.trait_path == "core/fmt/trait.Debug"
        assert fragment.table == {"alpha": [["a1"]]}
