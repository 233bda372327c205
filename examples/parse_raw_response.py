from __future__ import annotations
import argparse, sys
from _common import add_common_args, make_config_from_args, pretty
from afterpay import HTTPMessage, ParsingError, maybe_obfuscate

def main():
    ap = argparse.ArgumentParser(description="Parse a captured raw HTTP response (headers, blank line, body)")
    add_common_args(ap)
    ap.add_argument("path", help="File with the raw response; '-' reads stdin")
    args = ap.parse_args()

    cfg = make_config_from_args(args)
    if args.path == "-":
        raw = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8") as fh:
            raw = fh.read()
    raw = raw.replace("\r\n", "\n")
    head, _, body = raw.partition("\n\n")

    # content type first: body parsing depends on it
    content_type = HTTPMessage(cfg).set_raw_headers(head + "\n").get_header("content-type")
    msg = HTTPMessage(cfg)
    msg.set_content_type(content_type)
    msg.set_raw_headers(head + "\n")
    try:
        msg.set_raw_body(body)
    except ParsingError as e:
        print("[PARSE] body declared JSON but did not decode:", e.to_dict())

    print("[PARSE] HTTP version:", msg.http_version)
    print("[PARSE] Content-Type:", msg.content_type_simplified)
    print("[PARSE] Headers:")
    print(pretty(msg.parsed_headers))
    print("[PARSE] Body:")
    print(pretty(msg.parsed_body))
    print("[PARSE] Log-safe raw:")
    print(maybe_obfuscate(msg.get_raw(), cfg))

if __name__ == "__main__":
    main()
