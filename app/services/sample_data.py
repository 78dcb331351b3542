"""Built-in folder data set served when ``folder_source`` is ``sample``.

Ids are derived with ``uuid5`` so every process sees the same folders in the
same order, which is what lets a cursor issued by one request be replayed by
the next.
"""

from uuid import NAMESPACE_URL, UUID, uuid5

from app.schemas.folder import Folder

DEFAULT_ORG_ID = "c1556e17-b7c0-45a3-a6ae-9546248fb17a"

SAMPLE_ORG_IDS = (
    DEFAULT_ORG_ID,
    "6591e16c-c257-4366-bf6d-650c68f71284",
    "4212d618-66ff-468a-862d-ea49fef5e183",
)

_ADJECTIVES = (
    "amber", "brave", "calm", "daring", "eager", "fancy", "gentle", "hidden",
    "icy", "jolly", "keen", "lucky", "mellow", "noble", "quiet", "rapid",
)
_NOUNS = (
    "archive", "beacon", "canyon", "delta", "ember", "falcon", "glacier", "harbor",
    "island", "jungle", "kernel", "lagoon", "meadow", "nebula", "orchard", "prism",
)

_NAMESPACE = uuid5(NAMESPACE_URL, "folders/sample")


def folder_name(index: int) -> str:
    adjective = _ADJECTIVES[index % len(_ADJECTIVES)]
    noun = _NOUNS[(index // len(_ADJECTIVES)) % len(_NOUNS)]
    return f"{adjective}-{noun}"


def make_folders(org_id: UUID | str, count: int, *, start: int = 0) -> list[Folder]:
    org = UUID(str(org_id))
    return [
        Folder(id=uuid5(_NAMESPACE, f"{org}:{i}"), org_id=org, name=folder_name(i))
        for i in range(start, start + count)
    ]


def sample_folders(per_org: int = 12) -> list[Folder]:
    # interleave organizations so filtering by org_id actually has work to do
    by_org = [make_folders(org_id, per_org) for org_id in SAMPLE_ORG_IDS]
    return [folder for group in zip(*by_org) for folder in group]
