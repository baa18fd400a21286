from __future__ import annotations
import argparse
import sys

from casemark.casing.classifier import classify, find_words
from casemark.config import apply_env_overrides, configure_logging, load_config
from casemark.pipeline import Pipeline


def show(pipe: Pipeline, q: str, offset_type: str):
    for w in find_words(q):
        p = classify(w.text)
        print(f"  {w.text!r:>20}  [{w.start},{w.end})  {p.casing:<11}  {p.text!r}")
    print("normalized:", repr(pipe.normalize_str(q)) if pipe.normalizer else "-")
    for i, s in enumerate(pipe.run(q, offset_type=offset_type)):
        print(f"{i:>3}  {s.text!r:>24}  [{s.offsets[0]},{s.offsets[1]})")


def main():
    ap = argparse.ArgumentParser(description="Show casing classes and pre-tokenized splits.")
    ap.add_argument("text", nargs="?", help="text to inspect; reads stdin lines when omitted")
    ap.add_argument("--config", default="configs/default.yaml")
    ap.add_argument("--bytes", action="store_true", help="report byte offsets instead of char offsets")
    args = ap.parse_args()

    cfg = load_config(args.config)
    apply_env_overrides(cfg)
    configure_logging(cfg)
    pipe = Pipeline.from_config(cfg)
    offset_type = "byte" if args.bytes else "char"

    try:
        if args.text is not None:
            show(pipe, args.text, offset_type)
        else:
            for ln in sys.stdin:
                s = ln.rstrip("\n")
                if s:
                    print("Q:", s)
                    show(pipe, s, offset_type)
    finally:
        if pipe.recorder is not None:
            pipe.recorder.close()


if __name__ == "__main__":
    main()
