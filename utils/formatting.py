# utils/formatting.py
ARABIC_INDIC_DIGITS = '٠١٢٣٤٥٦٧٨٩'
_TO_ARABIC_INDIC = str.maketrans('0123456789', ARABIC_INDIC_DIGITS)

# Ornate parentheses framing verse numbers on the board
ORNATE_LEFT_PAREN = '﴾'
ORNATE_RIGHT_PAREN = '﴿'

def to_arabic_numerals(number):
    """Convert Latin digits to Arabic-Indic digits, e.g. 110 -> '١١٠'."""
    return str(number).translate(_TO_ARABIC_INDIC)

def verse_marker(verse_number, arabic=False):
    if verse_number is None:
        return ''
    if arabic:
        # Right-to-left text mirrors the parentheses
        return f"{ORNATE_RIGHT_PAREN}{to_arabic_numerals(verse_number)}{ORNATE_LEFT_PAREN}"
    return f"{ORNATE_LEFT_PAREN}{verse_number}{ORNATE_RIGHT_PAREN}"
