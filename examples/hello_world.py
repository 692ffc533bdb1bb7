"""
permission_engine — Hello World

Permits say which roles a document requires, the reader's privilege says
which roles they hold, and permissions combine both into one verdict.
"""

import asyncio
import logging
from dataclasses import dataclass

from permission_engine import (
    AccessGuard,
    ApprovalRecord,
    Denial,
    DynamicPermission,
    DynamicPermit,
    DynamicPrivilege,
    PermitPermission,
    ResultPermission,
    ResultPrivilege,
    Role,
    RolesPermit,
    SomePermission,
)

# ─── Your model (anything — completely decoupled from the engine) ───


@dataclass(frozen=True)
class Document:
    id: str
    owner: str
    public: bool
    readers: tuple[str, ...] = ()


@dataclass(frozen=True)
class ReaderRole(Role):
    document: Document


@dataclass(frozen=True)
class OwnerRole(Role):
    document: Document


def user_privilege(user: str, *, admin: bool = False):
    def decide(role):
        if admin:
            return ResultPrivilege(True)
        if isinstance(role, ReaderRole):
            return ResultPrivilege(user in role.document.readers)
        if isinstance(role, OwnerRole):
            return ResultPrivilege(role.document.owner == user)
        return ResultPrivilege(False)

    return DynamicPrivilege(decide)


# ─── Permits and permissions for documents ───

READER = DynamicPermit(lambda d: RolesPermit(ReaderRole(d, error=Denial("not_a_reader"))))
OWNER = DynamicPermit(lambda d: RolesPermit(OwnerRole(d, error=Denial("not_the_owner"))))
PUBLIC = DynamicPermission(lambda _, d: ResultPermission(d.public, Denial("not_public")))

READ = SomePermission(PUBLIC, PermitPermission(READER), PermitPermission(OWNER))
WRITE = SomePermission(PermitPermission(OWNER))


def report(label, approval) -> None:
    verdict = "allowed" if approval.value else "DENIED"
    print(f"  {label:<28} {verdict}")
    if not approval.value:
        print(f"    audit: {ApprovalRecord.from_approval(approval).model_dump_json()}")


async def main():
    logging.basicConfig(level=logging.INFO)

    roadmap = Document(id="roadmap", owner="alice", public=False, readers=("bob",))
    handbook = Document(id="handbook", owner="alice", public=True)

    # ──────────────────────────────────────
    #  1. One guard per authenticated user
    # ──────────────────────────────────────
    print("=== bob ===\n")
    bob = AccessGuard(user_privilege("bob"))

    report("read roadmap", await bob.check(READ, roadmap))
    report("write roadmap", await bob.check(WRITE, roadmap))
    report("read handbook", await bob.check(READ, handbook))

    # ──────────────────────────────────────
    #  2. Unknown user
    # ──────────────────────────────────────
    print("\n=== eve ===\n")
    eve = AccessGuard(user_privilege("eve"))

    try:
        await eve.require(READ, roadmap)
    except Denial as e:
        print(f"  read roadmap denied: {e.reason}")

    # ──────────────────────────────────────
    #  3. Administrators hold every role
    # ──────────────────────────────────────
    print("\n=== root ===\n")
    root = AccessGuard(user_privilege("root", admin=True))

    report("write roadmap", await root.check(WRITE, roadmap))


if __name__ == "__main__":
    asyncio.run(main())
