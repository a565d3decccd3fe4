"""
TokenAssembler tests
====================
Fixup passes (accents, scripts, Bin coercion) and the spacing table.
"""

from __future__ import annotations

import pytest

from unimath.services.macros import AtomClass, Style, Token, TokenAssembler
from unimath.services.macros.assembler import ACCENT_PLACEHOLDER, SPACING_TABLE, Spacing

from tests.conftest import MEDIUM, THICK, THIN

ORD, OP, BIN, REL = AtomClass.ORD, AtomClass.OP, AtomClass.BIN, AtomClass.REL
OPEN, CLOSE, PUNCT, INNER = AtomClass.OPEN, AtomClass.CLOSE, AtomClass.PUNCT, AtomClass.INNER
SCRIPT, ACCENT = AtomClass.SCRIPT, AtomClass.ACCENT


def tok(atom: AtomClass, text: str = "x") -> Token:
    return Token(atom, text)


@pytest.fixture
def assembler() -> TokenAssembler:
    return TokenAssembler(thin=THIN, medium=MEDIUM, thick=THICK)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. Spacing table
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestSpacingTable:
    def test_possible_pairs(self):
        # 64 pairs minus the 8 marked impossible in the TeXbook table
        assert len(SPACING_TABLE) == 56

    def test_only_visible_classes(self):
        for left, right in SPACING_TABLE:
            assert left < SCRIPT and right < SCRIPT

    @pytest.mark.parametrize("left,right,expected", [
        (ORD, ORD, Spacing.NONE),
        (ORD, OP, Spacing.THIN),
        (ORD, BIN, Spacing.MEDIUM),
        (ORD, REL, Spacing.THICK),
        (BIN, OP, Spacing.MEDIUM),
        (REL, REL, Spacing.NONE),
        (CLOSE, OP, Spacing.THIN),
        (PUNCT, ORD, Spacing.THIN),
        (INNER, CLOSE, Spacing.NONE),
        (OPEN, INNER, Spacing.NONE),
    ])
    def test_entries(self, left, right, expected):
        assert SPACING_TABLE[(left, right)][0] is expected

    def test_space_between_text_style(self, assembler):
        assert assembler.space_between(BIN, OP) == MEDIUM
        assert assembler.space_between(ORD, ORD) == ""
        assert assembler.space_between(REL, ORD) == THICK
        assert assembler.space_between(OP, ORD) == THIN

    def test_space_between_script_style(self, assembler):
        assert assembler.space_between(ORD, BIN, Style.SCRIPT) == ""
        assert assembler.space_between(REL, ORD, Style.SCRIPT) == ""
        assert assembler.space_between(PUNCT, ORD, Style.SCRIPT) == ""
        assert assembler.space_between(ORD, OP, Style.SCRIPT) == THIN
        assert assembler.space_between(INNER, OP, Style.SCRIPT) == THIN

    def test_impossible_pair_has_no_space(self, assembler):
        assert assembler.space_between(BIN, BIN) == ""


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. Fixup passes
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestAccentFolding:
    def test_mark_after_first_character(self):
        atoms = TokenAssembler.fixup([tok(ACCENT, "\u0302"), tok(ORD, "ab")])
        assert atoms == [tok(ORD, "a\u0302b")]

    def test_stacked_accents(self):
        atoms = TokenAssembler.fixup([tok(ACCENT, "\u0302"), tok(ACCENT, "\u0304"), tok(ORD, "x")])
        assert atoms == [tok(ORD, "x\u0304\u0302")]

    def test_trailing_accent_gets_placeholder(self):
        atoms = TokenAssembler.fixup([tok(ORD, "a"), tok(ACCENT, "\u0303")])
        assert atoms == [tok(ORD, "a"), tok(ORD, ACCENT_PLACEHOLDER + "\u0303")]

    def test_accent_keeps_class_of_base(self):
        atoms = TokenAssembler.fixup([tok(ORD, "a"), tok(ACCENT, "\u0307"), tok(REL, "=")])
        assert atoms[1] == tok(REL, "=\u0307")


class TestScriptFolding:
    def test_appends_to_previous(self):
        atoms = TokenAssembler.fixup([tok(OP, "∑"), tok(SCRIPT, "ⁿ")])
        assert atoms == [tok(OP, "∑ⁿ")]

    def test_consecutive_scripts(self):
        atoms = TokenAssembler.fixup([tok(ORD, "x"), tok(SCRIPT, "₁"), tok(SCRIPT, "²")])
        assert atoms == [tok(ORD, "x₁²")]

    def test_leading_script_becomes_ord(self):
        atoms = TokenAssembler.fixup([tok(SCRIPT, "²"), tok(ORD, "x")])
        assert atoms == [tok(ORD, "²"), tok(ORD, "x")]

    def test_no_transient_classes_survive(self):
        atoms = TokenAssembler.fixup([
            tok(SCRIPT), tok(ACCENT, "\u0302"), tok(ORD), tok(SCRIPT), tok(BIN), tok(ACCENT, "\u0302"),
        ])
        assert all(atom.atom < SCRIPT for atom in atoms)


class TestBinCoercion:
    @pytest.mark.parametrize("left", [OP, BIN, REL, OPEN, PUNCT, INNER])
    def test_bin_after_non_operand_becomes_ord(self, left):
        atoms = TokenAssembler.fixup([tok(ORD), tok(left), tok(BIN), tok(ORD)])
        assert atoms[2].atom is ORD

    @pytest.mark.parametrize("left", [ORD, CLOSE])
    def test_bin_after_operand_stays(self, left):
        atoms = TokenAssembler.fixup([tok(left), tok(BIN), tok(ORD)])
        assert atoms[1].atom is BIN

    def test_leading_bin(self):
        assert TokenAssembler.fixup([tok(BIN), tok(ORD)])[0].atom is ORD

    def test_trailing_bin(self):
        assert TokenAssembler.fixup([tok(ORD), tok(BIN)])[1].atom is ORD

    @pytest.mark.parametrize("right", [REL, CLOSE, PUNCT])
    def test_bin_before_rel_close_punct(self, right):
        atoms = TokenAssembler.fixup([tok(ORD), tok(BIN), tok(right), tok(ORD)])
        assert atoms[1].atom is ORD

    def test_second_of_two_bins(self):
        atoms = TokenAssembler.fixup([tok(ORD), tok(BIN), tok(BIN), tok(ORD)])
        assert [a.atom for a in atoms] == [ORD, BIN, ORD, ORD]

    def test_does_not_mutate_input(self):
        tokens = [tok(BIN), tok(ORD)]
        TokenAssembler.fixup(tokens)
        assert tokens[0].atom is BIN


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 3. Rendering
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestRender:
    def test_empty(self, assembler):
        assert assembler.render([]) == ""

    def test_single(self, assembler):
        assert assembler.render([tok(OP, "∫")]) == "∫"

    def test_binary_expression(self, assembler):
        tokens = [tok(ORD, "a"), tok(BIN, "+"), tok(ORD, "b")]
        assert assembler.render(tokens) == f"a{MEDIUM}+{MEDIUM}b"

    def test_script_style(self, assembler):
        tokens = [tok(ORD, "a"), tok(BIN, "+"), tok(ORD, "b")]
        assert assembler.render(tokens, Style.SCRIPT) == "a+b"

    def test_relation_after_bin(self, assembler):
        tokens = [tok(ORD, "a"), tok(BIN, "+"), tok(REL, "="), tok(ORD, "b")]
        assert assembler.render(tokens) == f"a+{THICK}={THICK}b"
