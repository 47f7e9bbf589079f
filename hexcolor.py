#ᓚᘏᗢ✮⋆˙✮ ⋆ ⭒˚｡⋆
import re
import sys

HEX_MARKER = "#"

# Optionales "#" und genau drei Hexziffern
SHORTHAND_HEX = re.compile(r"#?([0-9a-fA-F])([0-9a-fA-F])([0-9a-fA-F])")

# === Beispiele für die Demo ===
EXAMPLES = ["#f0c", "08b", "#aabbcc", "hello"]


def is_shorthand_hex(hex_color: str):
    """True, wenn der Code genau die Kurzschreibweise #RGB bzw. RGB hat."""
    return SHORTHAND_HEX.fullmatch(hex_color) is not None


def expand_shorthand_hex(hex_color: str):
    """Erweitert #RGB / RGB zu #RRGGBB.

    Alles andere (leer, 6-stellig, kein Hex, Leerzeichen ...) kommt
    unverändert zurück. Groß-/Kleinschreibung bleibt erhalten.
    """
    match = SHORTHAND_HEX.fullmatch(hex_color)
    if match is None:
        return hex_color

    r, g, b = match.groups()
    return HEX_MARKER + r * 2 + g * 2 + b * 2


def run_demo():
    print("=== Beispiele ===")
    for hex_input in EXAMPLES:
        print(f"{hex_input!r} -> {expand_shorthand_hex(hex_input)!r}")


def run_prompt():
    while True:
        try:
            hex_input = input("Bitte Hex-Farbcode eingeben (z.B. #F0C oder 08B, leer = Ende): ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not hex_input:
            break

        expanded = expand_shorthand_hex(hex_input)
        if expanded == hex_input:
            print("❌ Keine Kurzschreibweise, unverändert:", expanded)
        else:
            print("✅ Erweitert:", expanded)


def main(argv):
    if argv:
        for arg in argv:
            print(expand_shorthand_hex(arg))
    else:
        run_demo()
        run_prompt()


if __name__ == "__main__":
    main(sys.argv[1:])
