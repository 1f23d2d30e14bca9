"""Unit tests for the CSV line tokenizer."""

from oplbuild.tokenizer import parse_csv_line


class TestParseCsvLine:
    """Tests for quoted-field splitting."""

    def test_plain_fields(self):
        assert parse_csv_line('a,b,c') == ['a', 'b', 'c']

    def test_quoted_comma_is_kept(self):
        """Quotes are stripped and the embedded comma stays in the field."""
        assert parse_csv_line('a,"b,c",d') == ['a', 'b,c', 'd']

    def test_single_quotes_also_quote(self):
        assert parse_csv_line("a,'b,c',d") == ['a', 'b,c', 'd']

    def test_unbalanced_quote(self):
        """An unclosed quote still returns the last field without error."""
        assert parse_csv_line('a,"b,c') == ['a', 'b,c']

    def test_fields_are_trimmed(self):
        assert parse_csv_line('  a , b ,c  ') == ['a', 'b', 'c']

    def test_empty_fields_preserved(self):
        assert parse_csv_line('a,,c,') == ['a', '', 'c', '']

    def test_empty_line(self):
        assert parse_csv_line('') == ['']

    def test_quotes_inside_field_are_dropped(self):
        assert parse_csv_line('O"Brien,x') == ['OBrien,x']
