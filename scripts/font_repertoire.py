"""
Fixed character repertoire of the bitmap font table.

The calculator firmware indexes glyphs by position in this table, so the
order must never change. Printable ASCII comes first (index = code - 0x20).
"""

ASCII_CHARS = tuple(chr(i) for i in range(0x20, 0x7f))

SYMBOL_CHARS = (
    "ᴇ",
    "∞", "×", "÷", "±", "°", "∀", "∅", "∈", "∉", "∙", "∫", "≈", "≤", "≥", "⋂", "⋃",
    "←", "↑", "→", "↓", "↵", "⬏",
    "α", "β", "Γ", "γ", "Δ", "δ", "ϵ", "ϝ", "ζ", "η",
    "Θ", "θ", "ι", "κ", "Λ", "λ", "μ", "ν", "Ξ", "ξ", "Π", "π", "ρ", "Σ", "σ", "τ",
    "υ", "Φ", "ϕ", "χ", "Ψ", "ψ", "Ω", "ω",
    "…", "▪", "◂", "▴", "▸", "▾", "≠", "≷",
    "∡", "²", "³", "ˣ", "₂", "ℹ", "⟪", "⟫", "⦗", "⦘",
)

CHARS = ASCII_CHARS + SYMBOL_CHARS


def char_index(ch):
    """Position of ch in the table, or None when it is not in the repertoire."""
    try:
        return CHARS.index(ch)
    except ValueError:
        return None
