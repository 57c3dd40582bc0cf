# utils/alignment.py
"""Word alignment between word-by-word glosses and a verse translation.

When a reader hovers an Arabic word, the board highlights the token of the
verse translation that best matches that word's gloss. Matching is a plain
nearest-neighbour scan under Hamming distance, so only tokens with the same
length as the gloss are candidates.
"""
import string

_STRIP_CHARS = string.punctuation + '«»„“”‚‘’'

def hamming_distance(a, b):
    if len(a) != len(b):
        raise ValueError("Hamming distance needs strings of equal length")
    return sum(ch_a != ch_b for ch_a, ch_b in zip(a, b))

def tokenize(phrase):
    return (phrase or '').split()

def _normalize(token):
    return token.strip(_STRIP_CHARS).casefold()

def align_word(token, phrase):
    """Return the index of the phrase token closest to ``token``, or None.

    Ties go to the earliest token.
    """
    needle = _normalize(token or '')
    if not needle:
        return None

    best_index, best_distance = None, None
    for index, candidate in enumerate(tokenize(phrase)):
        candidate = _normalize(candidate)
        if len(candidate) != len(needle):
            continue
        distance = hamming_distance(needle, candidate)
        if best_distance is None or distance < best_distance:
            best_index, best_distance = index, distance
            if distance == 0:
                break
    return best_index

def align_verse_words(segment):
    """Align every word of ``segment`` against its translated text."""
    alignments = []
    for word in segment.words:
        if word.char_type == 'end':
            continue
        alignments.append({
            'position': word.position,
            'text': word.text,
            'translation': word.translation,
            'token_index': align_word(word.translation, segment.translated_text),
        })
    return alignments
