"""
Tests for the AliasTable domain service.

Covers longest-first precedence, word-boundary matching, the
containment pass used by conversational phrasing, and extra aliases.
"""

from tickerlens.domain.symbols.aliases import ASSET_ALIASES, AliasTable, alias_table


class TestAliasLookup:
    """Whole-message lookup."""

    def test_company_name(self):
        assert alias_table.lookup("what do you think of microsoft") == "MSFT"

    def test_case_insensitive(self):
        assert alias_table.lookup("Thoughts on NETFLIX earnings") == "NFLX"

    def test_several_aliases_share_a_symbol(self):
        """'facebook' and 'fb' both map to META."""
        assert alias_table.lookup("facebook") == "META"
        assert alias_table.lookup("fb earnings") == "META"

    def test_longest_alias_first(self):
        """A multi-word alias beats a shorter alias inside it."""
        table = AliasTable(aliases={"bank": "BNK", "bank of america": "BAC"})
        assert table.lookup("bank of america results") == "BAC"

    def test_multi_word_crypto_alias(self):
        assert alias_table.lookup("shiba inu coin") == "SHIB"

    def test_word_boundaries(self):
        """'uni' does not match inside 'community'."""
        assert alias_table.lookup("community events") is None

    def test_regex_metacharacters_are_escaped(self):
        table = AliasTable(aliases={"c++ corp": "CPP"})
        assert table.lookup("is c++ corp a buy") == "CPP"
        assert table.lookup("is cc corp a buy") is None

    def test_no_match(self):
        assert alias_table.lookup("the quick brown fox") is None

    def test_empty_text(self):
        assert alias_table.lookup("") is None


class TestAliasSpanMatching:
    """Span resolution for conversational phrasing."""

    def test_exact_span(self):
        assert alias_table.match_span("  Solana ") == "SOL"

    def test_exact_match_preferred_over_containment(self):
        """An exact name wins even when a longer name contains the span."""
        table = AliasTable(aliases={"tesla motors": "TSLA", "motors": "GM"})
        assert table.match_span("motors") == "GM"

    def test_span_contains_alias(self):
        assert alias_table.match_span("dogecoins") == "DOGE"

    def test_alias_contains_span(self):
        assert alias_table.match_span("chainli") == "LINK"

    def test_span_must_start_an_alias_word(self):
        """Fragments from the middle of an alias name do not match."""
        assert alias_table.match_span("the") is None
        assert alias_table.match_span("her") is None
        assert alias_table.match_span("ink") is None

    def test_span_may_start_a_later_alias_word(self):
        table = AliasTable(aliases={"coca cola": "KO"})
        assert table.match_span("col") == "KO"

    def test_short_alias_not_used_for_containment(self):
        """Two-letter aliases never match by containment."""
        table = AliasTable(aliases={"fb": "META"})
        assert table.match_span("fbi") is None

    def test_blank_span(self):
        assert alias_table.match_span("   ") is None


class TestAliasTableConstruction:
    """Construction and read-only view."""

    def test_default_table_covers_every_alias(self):
        assert len(alias_table) == len(ASSET_ALIASES)

    def test_entries_sorted_longest_first(self):
        lengths = [len(name) for name, _ in alias_table.entries]
        assert lengths == sorted(lengths, reverse=True)

    def test_extra_aliases_are_normalized_and_merged(self):
        table = AliasTable(extra_aliases={" Palantir ": "pltr"})
        assert "palantir" in table
        assert table.lookup("palantir") == "PLTR"
        assert table.lookup("apple") == "AAPL"

    def test_extra_aliases_override_base(self):
        table = AliasTable(extra_aliases={"meta": "MTA"})
        assert table.lookup("meta") == "MTA"

    def test_default_symbols_are_uppercase(self):
        assert all(symbol == symbol.upper() for symbol in ASSET_ALIASES.values())
