# zonescan

`zonescan` is a pure-Python library of building blocks for reading DNS
zone files in presentation format (RFC 1035 master files). It has two
parts:

* a **scanner** that splits zone text into tokens. It handles quoted
  strings, comments, backslash escapes, grouping parentheses and line
  counting. Input can be fed in chunks of any size.
* a set of **field parsers** that turn the text form of single RDATA
  fields into wire-format bytes or numbers.

The package has no runtime dependencies.

## Installation

```
pip install zonescan
```

## Tokenizing zone text

```python
from zonescan.scanner import tokenize

for token in tokenize('foo. TXT "bar baz" ; a comment\n'):
    print(token.kind, token.text, token.line)
```

This yields two `CONTIGUOUS` tokens (`foo.` and `TXT`), one `QUOTED`
token (`bar baz`, without the quotes) and one `LINE_FEED` token; the
comment is dropped. Each `Token` carries its `kind` (a `TokenKind`),
its raw `text`, its `start` and `end` offsets, the `line` it starts on
and, for line feeds, `newlines`: the number of lines it completes,
counting newlines that were embedded in tokens since the previous line
feed. Escape sequences are left in the token text as written.

`tokenize(text, block_size=64)` feeds the text to the scanner in blocks.
For streamed input, use `Scanner` directly: call `Scanner.scan(data)`
for each chunk and collect the tokens it returns, then call
`Scanner.finish()` once the input ends. `finish()` returns any token
still open and raises `ZoneSyntaxError` if a quoted string was never
closed.

The module also has `classify(char)`, which returns the `CharClass` of
one character, and the 64-bit block helpers `find_escaped` and
`find_delimiters`.

## Parsing RDATA fields

| Module | Functions | Result |
| --- | --- | --- |
| `zonescan.addresses` | `parse_ip4`, `scan_ip4`, `scan_apl`, `parse_ilnp64` | IPv4 octets, APL item wire form, 8-octet locator |
| `zonescan.location` | `scan_degrees`, `scan_minutes`, `scan_seconds`, `scan_altitude`, `scan_precision` | LOC field values as integers |
| `zonescan.timestamp` | `parse_time`, `is_leap_year`, `leap_days` | 4 big-endian octets of seconds since 1970 |
| `zonescan.caa` | `parse_caa_tag` | length-prefixed CAA tag |
| `zonescan.base32` | `decode_base32hex`, `parse_base32` | decoded octets, length-prefixed octets |
| `zonescan.wks` | `scan_protocol`, `scan_service` | protocol number, port number |
| `zonescan.types` | `scan_type`, `scan_type_or_class` | a `Mnemonic` (`name`, `code`, `kind`) |
| `zonescan.bitmaps` | `parse_nsec`, `parse_nxt` | NSEC windowed bitmaps, flat NXT bitmap |

```python
from zonescan.addresses import parse_ip4
from zonescan.timestamp import parse_time
from zonescan.types import scan_type
from zonescan.bitmaps import parse_nsec, parse_nxt

parse_ip4("192.168.0.1")          # b'\xc0\xa8\x00\x01'
parse_time("20240101000000")      # b'e\x92\x00\x80' (1704067200)
scan_type("aaaa")                 # Mnemonic(name='AAAA', code=28, kind=<Kind.TYPE: 1>)
parse_nxt(["A", "NS"])            # b'\x60'
parse_nsec(["A", "MX", "RRSIG", "NSEC"])
```

`parse_time` reads fourteen characters as `YYYYmmddHHMMSS` and anything
else as a plain unsigned 32-bit number. Type and class mnemonics are
matched case insensitively, and the generic `TYPEnnn` and `CLASSnnn`
forms are accepted; `scan_type` rejects class names. WKS protocols are
known by name only for `tcp` and `udp`, and services only for a fixed
set of well-known names; anything else must be given as a number.

## Errors

The parsers signal invalid input in one of two ways:

* `parse_ip4`, `parse_ilnp64`, `parse_time`, `parse_caa_tag`,
  `parse_base32`, `parse_nsec` and `parse_nxt` raise exceptions from
  `zonescan.errors`, all derived from `ZoneError`:
  * `ZoneSyntaxError`: the text is malformed.
  * `ZoneSemanticError`: the text is well formed but its value is not
    allowed; `parse_caa_tag` raises it for a tag holding anything other
    than ASCII letters and digits.
* the lower-level scanners `scan_ip4`, `scan_apl`, the `location`
  functions, `decode_base32hex`, `scan_protocol`, `scan_service`,
  `scan_type` and `scan_type_or_class` raise `ValueError`.

## What the package does not do

`zonescan` does not parse whole zone files into resource records. It
has no handling of owner names, TTLs, classes as record fields,
`$ORIGIN`, `$TTL` or `$INCLUDE` directives, and no record callback;
it offers the tokenizer and the individual field parsers listed above.
It has no command-line program.

## Low-level helpers

`zonescan.bits` has the 64-bit mask helpers used by the scanner:
`trailing_zeroes`, `leading_zeroes`, `count_ones`, `clear_lowest_bit`,
`prefix_xor` and `add_overflow`.

## Running the tests

```
pip install -e ".[test]"
pytest
```