# tifinagh

Converts Amazigh (Berber) text written in the Latin script into the Tifinagh
script.

## Installation

```
pip install .
```

## Command line

```
$ tifinagh azul
ⴰⵣⵓⵍ
```

The command converts its first argument and prints the result. It ignores any
further arguments. If you give no argument, it prints a short usage hint. To
convert text that has spaces, put quotes around it so that it arrives as one
argument:

```
$ tifinagh "azul tamazight"
ⴰⵣⵓⵍ ⵜⴰⵎⴰⵣⵉⴳⵀⵜ
```

You can also start the command with `python -m tifinagh.cli`.

## Library

```python
from tifinagh.transliterate import transliterate

transliterate("azul")   # 'ⴰⵣⵓⵍ'
transliterate("g°a")    # 'ⴳⵯⴰ'
transliterate(None)     # None
```

`transliterate` reads the text from left to right. At each position it tries the
rules in `RULES` in order and applies the first one that matches. Each rule is a
`TranslitRule` with two fields: `src`, the Latin sequence, and `dst`, the
Tifinagh text that replaces it. The rules cover:

- spirants written with a line below: `ṯ ḏ ḵ ḇ g̱`
- labialized consonants: `g°`, `k°`
- affricates and special letters: `č ğ ɣ ε`
- emphatic consonants written with a dot below: `ḍ ṭ ṣ ẓ ṛ ḥ`
- the lower-case base alphabet, except `o` and `p`

No rule covers digits, punctuation, spaces, upper-case letters, `o` or `p`, so
these are copied through unchanged.

## Running the tests

```
pip install ".[test]"
pytest
```