import pytest

from kmer_histogram.headers import MAX_ABUNDANCE, build_header, extract_abundance


class TestBuildHeader:
    """Identifier and description joined by one space"""

    def test_with_description(self):
        assert build_header("read_1", "ka:f:5 len=40") == "read_1 ka:f:5 len=40"

    def test_without_description_keeps_trailing_space(self):
        assert build_header("read_1", None) == "read_1 "
        assert build_header("read_1") == "read_1 "


class TestExtractAbundance:
    """Parsing of the ka:f: tag"""

    def test_documented_header(self):
        assert extract_abundance("SRR123_42 ka:f:17") == 17

    def test_missing_tag(self):
        assert extract_abundance("read_1 len=40") is None
        assert extract_abundance("") is None

    @pytest.mark.parametrize("header", ["read ka:f:", "read ka:f:abc", "read ka:i:5", "read KA:F:5"])
    def test_malformed_tag_is_absent(self, header):
        assert extract_abundance(header) is None

    def test_first_tag_wins(self):
        assert extract_abundance("read ka:f:3 ka:f:7") == 3

    def test_digits_stop_at_non_digit(self):
        assert extract_abundance("read ka:f:12.5") == 12

    def test_tag_adjacent_to_identifier(self):
        header = build_header("readka:f:9", None)
        assert extract_abundance(header) == 9

    def test_zero_abundance(self):
        assert extract_abundance("read ka:f:0") == 0

    def test_abundance_width(self):
        assert extract_abundance(f"read ka:f:{MAX_ABUNDANCE}") == MAX_ABUNDANCE
        assert extract_abundance(f"read ka:f:{MAX_ABUNDANCE + 1}") is None

    def test_non_ascii_digits_are_absent(self):
        assert extract_abundance("read ka:f:\u0661\u0662") is None
