#!/usr/bin/env python3
"""
Script to grant a role to an existing user.
Usage: python make_admin.py <username> [--role ADMIN|MODERATOR|USER]
"""

import argparse
import sys

from sqlalchemy.orm import Session

from cinema.db.database import SessionLocal
from cinema.domain.enums import RoleName
from cinema.infrastructure.orm import UserModel, RoleModel


def grant_role(db: Session, username: str, role: RoleName) -> bool:
    """Attach a role to the user; False when the user or the role row is missing."""
    user = db.query(UserModel).filter(UserModel.username == username).first()
    if not user:
        print(f"User '{username}' not found")
        return False

    role_model = db.query(RoleModel).filter(RoleModel.name == role).first()
    if not role_model:
        print(f"Role {role.name} is not seeded; start the API once to create it")
        return False

    if role_model not in user.roles:
        user.roles.append(role_model)
        db.commit()

    print(f"User '{username}' roles: {', '.join(sorted(r.name.value for r in user.roles))}")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Grant a role to an existing user")
    parser.add_argument("username")
    parser.add_argument("--role", choices=[r.name for r in RoleName], default=RoleName.ADMIN.name)
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        return 0 if grant_role(db, args.username, RoleName[args.role]) else 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
