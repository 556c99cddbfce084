import argparse
import json
import logging
import sys
from typing import List, Optional

from .dealer import Dealer
from .errors import BLSError, InvalidInput, RandomSourceFailure
from .identity import ID
from .keys import PublicKey, SecretKey
from .randomness import StreamRandomSource
from .signature import Signature

logger = logging.getLogger("tbls")


def keygen(args):
    if args.random_file:
        with open(args.random_file, "rb") as stream:
            dealer = Dealer(args.threshold, args.participants, StreamRandomSource(stream))
            dealer.init_keygen()
    else:
        dealer = Dealer(args.threshold, args.participants)
        dealer.init_keygen()

    participants = dealer.deal()
    print(
        json.dumps(
            {
                "threshold": dealer.threshold,
                "public_key": dealer.public_key.serialize_to_hex_str(),
                "master_public_key": [
                    pk.serialize_to_hex_str() for pk in dealer.master_public_key
                ],
                "shares": [
                    {
                        "id": p.index,
                        "secret_key": p.secret_key_share.serialize_to_hex_str(),
                    }
                    for p in participants
                ],
            },
            indent=2,
        )
    )
    return 0


def sign(args):
    secret_key = SecretKey.deserialize_hex_str(args.secret_key)
    print(secret_key.sign(args.message.encode()).serialize_to_hex_str())
    return 0


def verify(args):
    public_key = PublicKey.deserialize_hex_str(args.public_key)
    signature = Signature.deserialize_hex_str(args.signature)
    if signature.verify(public_key, args.message.encode()):
        print("valid")
        return 0
    print("invalid")
    return 1


def parse_share(value: str):
    index, sep, signature = value.partition(":")
    if not sep or not (index.isascii() and index.isdigit()):
        raise InvalidInput(f"Share must look like INDEX:SIGNATURE, got {value!r}.")
    return ID.from_index(int(index)), Signature.deserialize_hex_str(signature)


def recover(args):
    ids, signatures = zip(*(parse_share(share) for share in args.share))
    print(Signature.recover(signatures, ids).serialize_to_hex_str())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tbls")
    parser.add_argument("--verbose", action="store_true", help="Log debug output.")
    subparsers = parser.add_subparsers()

    parser_keygen = subparsers.add_parser("keygen", help="Deal a threshold key.")
    parser_keygen.add_argument("--threshold", type=int, required=True, help="Signatures needed.")
    parser_keygen.add_argument("--participants", type=int, required=True, help="Shares dealt.")
    parser_keygen.add_argument("--random-file", type=str, help="Read randomness from this file.")
    parser_keygen.set_defaults(func=keygen)

    parser_sign = subparsers.add_parser("sign", help="Sign a message.")
    parser_sign.add_argument("--secret-key", type=str, required=True, help="Secret key or share (hex).")
    parser_sign.add_argument("--message", type=str, required=True, help="Message to sign.")
    parser_sign.set_defaults(func=sign)

    parser_verify = subparsers.add_parser("verify", help="Verify a message.")
    parser_verify.add_argument("--public-key", type=str, required=True, help="Public key for verification (hex).")
    parser_verify.add_argument("--signature", type=str, required=True, help="Signature (hex).")
    parser_verify.add_argument("--message", type=str, required=True, help="Message to verify.")
    parser_verify.set_defaults(func=verify)

    parser_recover = subparsers.add_parser("recover", help="Combine partial signatures.")
    parser_recover.add_argument(
        "--share", action="append", required=True, help="INDEX:SIGNATURE, repeat per partial signature."
    )
    parser_recover.set_defaults(func=recover)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    try:
        return args.func(args)
    except RandomSourceFailure as e:
        logger.error("Random source failure, no key material produced: %s", e)
        return 3
    except (BLSError, OSError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
