#!/usr/bin/env python3
"""Find misspellings of a word in a sentence."""

import trigram as tg

haystack = (
    "Did you know that bufalo buffalow Bungalo biffalo buffaloo huffalo snuffalo fluffalo?"
)
needle = "buffalo"

for m in tg.find_words_iter(needle, haystack, threshold=0.3):
    print(f"{m.start:3d}-{m.end:<3d} {m.score:.3f}  {m.text!r}")
