#!/usr/bin/env python3
"""Print the user name a retriever extracts from a client certificate."""

import argparse
import sys
from pathlib import Path

from x509_username.lib.cert_utils import load_certificate
from x509_username.lib.config import RetrieveField, RetrieverConfig
from x509_username.lib.logging_config import LOGGER
from x509_username.lib.retriever import create_retriever


def main(argv: list[str] | None = None) -> int:
    """Extract the user name from a PEM or DER certificate file.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = argparse.ArgumentParser(description="Show the user name of a client certificate")
    parser.add_argument(
        "--cert",
        type=Path,
        required=True,
        help="Client certificate file (PEM or DER)",
    )
    parser.add_argument(
        "--retrieve-field",
        choices=[field.value for field in RetrieveField],
        default=RetrieveField.SUBJECT_DN.value,
        help="Certificate location holding the user name (default: SubjectDN)",
    )
    parser.add_argument(
        "--configuration",
        default=None,
        help="Attribute or SAN name, e.g. CN, e, 'Principal Name' (default: whole Subject DN)",
    )
    args = parser.parse_args(argv)

    try:
        cert_data = args.cert.read_bytes()
    except OSError as e:
        LOGGER.error("Certificate file not readable: %s", e)
        return 1

    cert = load_certificate(cert_data)
    if cert is None:
        LOGGER.error("Not a certificate: %s", args.cert)
        return 1

    config = RetrieverConfig(
        retrieve_field=RetrieveField.parse(args.retrieve_field),
        configuration=args.configuration,
    )
    user_name = create_retriever(config).get_user_name(cert)
    if user_name is None:
        LOGGER.error("No user name found in %s", args.cert)
        return 1

    print(user_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
