#!/usr/bin/env python3
"""
Issue an access token for a profile id and role.

Admin tokens have no backing profile; this is the only way to get one.

    python scripts/issue_token.py --role admin
    python scripts/issue_token.py --subject <profile-uuid> --role client
"""

import argparse
from uuid import UUID, uuid4

from marketplace.domain.value_objects.actor import Role
from marketplace.infrastructure.security import TokenService


def parse_args():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--subject",
        type=UUID,
        default=None,
        help="Profile id to put in the token (random for admin if omitted)",
    )
    parser.add_argument(
        "--role",
        choices=[role.value for role in Role],
        required=True,
    )
    parser.add_argument(
        "--expire-minutes",
        type=int,
        default=None,
        help="Override ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    role = Role(args.role)

    if args.subject is None and role != Role.ADMIN:
        raise SystemExit("--subject is required for client and contractor tokens")

    token_service = TokenService(expire_minutes=args.expire_minutes)
    print(token_service.create_access_token(args.subject or uuid4(), role))


if __name__ == "__main__":
    main()
