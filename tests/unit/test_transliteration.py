"""
Unit tests for runic_quotes/transliteration/

Coverage plan
─────────────
Script / tables  → 6 tests  (parse, unicode range, dispatch, immutability)
engine basics    → 8 tests  (empty, case, a–z coverage, glyph ranges, merges)
digraphs         → 4 tests  (longest match per script)
pass-through     → 6 tests  (spaces, punctuation, digits, dropped symbols)
graphemes        → 6 tests  (combining marks, CRLF, flags, spacing marks, Hangul)
─────────────────────────────────────────────────────────────────
Total            = 30 tests
"""

import string

import pytest


ALL_SCRIPTS = ["ELDER", "YOUNGER", "CIRTH"]


def _script(name: str):
    from runic_quotes.transliteration import Script
    return Script[name]


# ─────────────────────────────────────────────────────────────────────────────
# 1. Script + tables
# ─────────────────────────────────────────────────────────────────────────────

class TestScript:

    def test_parse_accepts_value_and_name_case_insensitively(self):
        from runic_quotes.transliteration import Script
        assert Script.parse("Elder Futhark") is Script.ELDER
        assert Script.parse("  younger ") is Script.YOUNGER
        assert Script.parse("CIRTH (ANGERTHAS)") is Script.CIRTH

    def test_parse_unknown_returns_none(self):
        from runic_quotes.transliteration import Script
        assert Script.parse("ogham") is None
        assert Script.parse(None) is None

    def test_futharks_use_runic_block_and_cirth_has_no_range(self):
        from runic_quotes.transliteration import Script
        assert Script.ELDER.unicode_range == (0x16A0, 0x16EA)
        assert Script.YOUNGER.unicode_range == (0x16A0, 0x16EA)
        assert Script.CIRTH.unicode_range is None


class TestTables:

    @pytest.mark.parametrize("name", ALL_SCRIPTS)
    def test_get_tables_returns_table_for_each_script(self, name):
        from runic_quotes.transliteration import get_tables
        script = _script(name)
        assert get_tables(script).script is script

    def test_get_tables_unknown_script_raises_value_error(self):
        from runic_quotes.transliteration import get_tables
        with pytest.raises(ValueError):
            get_tables("Ogham")

    def test_tables_are_read_only(self):
        from runic_quotes.transliteration import Script, get_tables
        tables = get_tables(Script.ELDER)
        with pytest.raises(TypeError):
            tables.single["a"] = "x"


# ─────────────────────────────────────────────────────────────────────────────
# 2. Engine basics
# ─────────────────────────────────────────────────────────────────────────────

class TestTransliterateBasics:

    @pytest.mark.parametrize("name", ALL_SCRIPTS)
    def test_empty_input_gives_empty_output(self, name):
        from runic_quotes.transliteration import transliterate
        assert transliterate("", _script(name)) == ""

    @pytest.mark.parametrize("name", ALL_SCRIPTS)
    def test_case_insensitive(self, name):
        from runic_quotes.transliteration import transliterate
        script = _script(name)
        assert transliterate("HELLO", script) == transliterate("hello", script)
        assert transliterate("The Road", script) == transliterate("the road", script)

    @pytest.mark.parametrize("name", ALL_SCRIPTS)
    def test_every_latin_letter_maps_to_a_glyph(self, name):
        from runic_quotes.transliteration import transliterate
        script = _script(name)
        for letter in string.ascii_lowercase:
            out = transliterate(letter, script)
            assert len(out) == 1, letter
            assert out not in string.ascii_letters, letter

    def test_futhark_glyphs_stay_in_runic_block(self):
        from runic_quotes.transliteration import Script, transliterate
        for script in (Script.ELDER, Script.YOUNGER):
            low, high = script.unicode_range
            out = transliterate(string.ascii_lowercase, script)
            assert all(low <= ord(ch) <= high for ch in out)

    def test_cirth_glyphs_are_private_use(self):
        from runic_quotes.transliteration import Script, transliterate
        out = transliterate(string.ascii_lowercase, Script.CIRTH)
        assert out
        assert all(0xE000 <= ord(ch) <= 0xF8FF for ch in out)

    def test_elder_hello(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("hello", Script.ELDER) == "ᚻᛖᛚᛚᚩ"

    def test_younger_merges_vowels_onto_one_rune(self):
        from runic_quotes.transliteration import Script, transliterate
        a = transliterate("a", Script.YOUNGER)
        assert transliterate("e", Script.YOUNGER) == a
        assert transliterate("o", Script.YOUNGER) == a

    def test_transliterate_all_covers_every_script(self):
        from runic_quotes.transliteration import Script, transliterate, transliterate_all
        result = transliterate_all("Not all who wander are lost")
        assert set(result) == set(Script)
        for script, text in result.items():
            assert text == transliterate("Not all who wander are lost", script)


# ─────────────────────────────────────────────────────────────────────────────
# 3. Digraphs (longest match first)
# ─────────────────────────────────────────────────────────────────────────────

class TestDigraphs:

    def test_elder_th_is_thurisaz(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("the", Script.ELDER) == "ᚦᛖ"

    def test_elder_thing_uses_th_and_ng_runes(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("thing", Script.ELDER) == "ᚦᛁᛜ"

    def test_younger_ng_falls_to_naudr(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("sing", Script.YOUNGER) == "ᛊᛁᚾ"

    def test_cirth_th_digraph(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("the", Script.CIRTH) == "\ue00b\ue003"


# ─────────────────────────────────────────────────────────────────────────────
# 4. Pass-through
# ─────────────────────────────────────────────────────────────────────────────

class TestPassThrough:

    @pytest.mark.parametrize("name", ALL_SCRIPTS)
    def test_words_separated_by_one_space(self, name):
        from runic_quotes.transliteration import transliterate
        out = transliterate("hello world", _script(name))
        assert out.count(" ") == 1
        left, right = out.split(" ")
        assert left and right

    @pytest.mark.parametrize("name", ALL_SCRIPTS)
    def test_punctuation_and_digits_pass_through(self, name):
        from runic_quotes.transliteration import transliterate
        out = transliterate("hello, world! 123", _script(name))
        assert "," in out
        assert "!" in out
        assert "123" in out

    def test_each_whitespace_character_becomes_one_space(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("a\tb", Script.ELDER) == "ᚨ ᛒ"
        assert transliterate("a  b", Script.ELDER) == "ᚨ  ᛒ"

    def test_newline_becomes_space(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("a\nb", Script.ELDER) == "ᚨ ᛒ"

    def test_unmapped_symbols_are_dropped(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("a$b", Script.ELDER) == "ᚨᛒ"
        assert transliterate("a+b", Script.ELDER) == "ᚨᛒ"

    def test_never_raises_on_arbitrary_text(self):
        from runic_quotes.transliteration import Script, transliterate
        odd = "Ωμέγα \u200b\x00 \U0001f600\U0001f44d\U0001f3fd 日本語 \U0001f469\u200d\U0001f4bb"
        for script in Script:
            assert isinstance(transliterate(odd, script), str)


# ─────────────────────────────────────────────────────────────────────────────
# 5. Grapheme clusters
# ─────────────────────────────────────────────────────────────────────────────

class TestGraphemes:

    def test_combining_mark_stays_with_base(self):
        from runic_quotes.transliteration.engine import graphemes
        assert list(graphemes("e\u0301a")) == ["e\u0301", "a"]

    def test_crlf_is_one_cluster(self):
        from runic_quotes.transliteration.engine import graphemes
        from runic_quotes.transliteration import Script, transliterate
        assert list(graphemes("a\r\nb")) == ["a", "\r\n", "b"]
        assert transliterate("a\r\nb", Script.ELDER) == "ᚨ ᛒ"

    def test_decomposed_accent_drops_whole_cluster(self):
        from runic_quotes.transliteration import Script, transliterate
        assert transliterate("cafe\u0301", Script.ELDER) == "ᚴᚨᚠ"

    def test_flag_pair_is_one_cluster_and_dropped(self):
        from runic_quotes.transliteration.engine import graphemes
        from runic_quotes.transliteration import Script, transliterate
        flag = "\U0001f1f3\U0001f1f4"
        assert list(graphemes(f"a{flag}b")) == ["a", flag, "b"]
        assert transliterate(f"a{flag}b", Script.ELDER) == "ᚨᛒ"

    def test_spacing_mark_joins_base_and_drops_cluster(self):
        from runic_quotes.transliteration.engine import graphemes
        from runic_quotes.transliteration import Script, transliterate
        assert graphemes("a\u0e33") == ["a\u0e33"]
        assert transliterate("a\u0e33", Script.ELDER) == ""
        assert transliterate("ba\u0e33b", Script.ELDER) == "ᛒᛒ"

    def test_conjoining_jamo_and_conjuncts_are_single_clusters(self):
        from runic_quotes.transliteration.engine import graphemes
        assert graphemes("\u1100\u1161") == ["\u1100\u1161"]
        assert graphemes("\u0915\u094d\u0937") == ["\u0915\u094d\u0937"]
