"""Building blocks of an HTTP load tester: response headers, MD5 digests, page buffer and text helpers."""

__version__ = "4.1.7"