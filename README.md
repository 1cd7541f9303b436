# siege

This is a plain Python library of the pieces an HTTP load tester is built from.

- `siege.response` reads HTTP response header lines into a `Response` object. It covers:
  - the status line, protocol and code;
  - content type and charset;
  - content length;
  - content and transfer encodings;
  - location and redirects;
  - connection and keep-alive parameters;
  - ETag and Last-Modified;
  - WWW and proxy authentication challenges.
- `siege.md5` computes MD5 digests with no outside dependencies. `Md5` is an incremental object with `update`, `copy`, `digest` and `hexdigest`. `md5_buffer` digests a byte string and `md5_stream` digests a binary stream.
- `siege.page.Page` is a growable text buffer. It has `concat`, `clear`, `value`, `size` and `len()`.
- `siege.perl` holds string helpers: `chomp`, `ltrim`, `rtrim`, `trim`, `empty`, `word_count` and `split`.
- `siege.util` holds several helpers:
  - `parse_time` reads time options such as `30s`, `5m` and `1h`;
  - `strmatch`, `stristr` and `strncasestr` do case-insensitive matching;
  - `okay` tests status codes;
  - `rand_r` and `urandom` produce random values;
  - `echo` and `debug` print output.
- `siege.notify` writes coloured messages to the terminal with `notify` and `display`, and to the system log with `syslog_message`, `open_log` and `close_log`. A `FATAL` message raises `FatalError`, which exits with status 1 if it is not caught.
- `siege.version` holds `VERSION` and `PROGRAM_NAME`.

## Examples

Read response headers:

```python
from siege.response import Response

response = Response()
response.set_code("HTTP/1.1 200 OK")
response.set_content_type("content-type: text/html; charset=utf-8")
print(response.code(), response.success(), response.content_type(), response.charset())
# 200 True text/html utf-8
```

Compute a digest:

```python
from siege.md5 import Md5, md5_buffer

print(Md5(b"abc").hexdigest())
# 900150983cd24fb0d6963f7d28e17f72
print(md5_buffer(b"").hex())
# d41d8cd98f00b204e9800998ecf8427e
```

Parse a time option and split a string:

```python
from siege.util import parse_time
from siege.perl import split

print(parse_time("5m"))
# (1, 300)
print(split(",", "a,,b"))
# ['a', 'b']
```

## What this package does not do

The package has no command to run, and it opens no network connections. It sends no requests and generates no load. It does not parse URLs or resolve relative links, and it does not extract links from HTML pages. It only supplies the header parsing, digest, buffer and text helpers listed above.

## Tests

Running the tests requires the `test` extra, which provides pytest.