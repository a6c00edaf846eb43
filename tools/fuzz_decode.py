#!/usr/bin/python3

import atheris

with atheris.instrument_imports():
    import sys
    from bencodex import DecodeError, decode, encode
    from bencodex.conf.settings import CodecSettings
    from bencodex.utils.logging import LoggingOutput, setup_logging

SETTINGS = CodecSettings(MAX_INPUT_BYTES=1 << 20)


def TestOneInput(data):
    try:
        node = decode(data, settings=SETTINGS)
    except DecodeError:
        return

    # whatever decodes must re-encode to something that decodes to the same tree
    assert decode(encode(node), settings=SETTINGS) == node


def main():
    # every rejected input is logged at debug level, keep them out of the fuzzer output
    setup_logging(logging_output=LoggingOutput.NULL)
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
