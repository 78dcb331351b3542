from uuid import UUID, uuid4

import pytest

from app.core.errors import FolderNotFoundError, InvalidOrganizationIDError
from app.services.folder_lookup import SampleFolderLookup, SqlFolderLookup, seed_folders
from app.services.sample_data import DEFAULT_ORG_ID, SAMPLE_ORG_IDS, make_folders, sample_folders

VALID_ORG_ID = UUID("6591e16c-c257-4366-bf6d-650c68f71284")
NIL_ORG_ID = UUID(int=0)


@pytest.fixture(params=["sample", "sql"])
def lookup(request, session_factory):
    folders = sample_folders()
    if request.param == "sample":
        return SampleFolderLookup(folders)
    seed_folders(session_factory, folders)
    return SqlFolderLookup(session_factory)


def test_fetch_by_organization_returns_only_that_org(lookup):
    folders = lookup.fetch_by_organization(VALID_ORG_ID)
    assert folders
    for folder in folders:
        assert folder.id != NIL_ORG_ID
        assert folder.org_id == VALID_ORG_ID
        assert folder.name


def test_fetch_by_organization_preserves_source_order(lookup):
    expected = [f for f in sample_folders() if f.org_id == VALID_ORG_ID]
    assert lookup.fetch_by_organization(VALID_ORG_ID) == expected
    assert lookup.fetch_by_organization(VALID_ORG_ID) == expected


def test_unknown_org_is_not_found(lookup):
    with pytest.raises(FolderNotFoundError, match="no folders found"):
        lookup.fetch_by_organization(uuid4())


@pytest.mark.parametrize("org_id", [NIL_ORG_ID, None, "not-a-uuid"])
def test_invalid_org_id(lookup, org_id):
    with pytest.raises(InvalidOrganizationIDError, match="Invalid ORG ID"):
        lookup.fetch_by_organization(org_id)


def test_string_org_id_is_accepted():
    lookup = SampleFolderLookup(sample_folders())
    assert lookup.fetch_by_organization(DEFAULT_ORG_ID) == lookup.fetch_by_organization(UUID(DEFAULT_ORG_ID))


def test_sample_data_is_deterministic():
    assert sample_folders() == sample_folders()
    assert {str(f.org_id) for f in sample_folders()} == set(SAMPLE_ORG_IDS)
    ids = [f.id for f in sample_folders()]
    assert len(ids) == len(set(ids))


def test_seed_folders_reports_count(session_factory):
    assert seed_folders(session_factory, make_folders(VALID_ORG_ID, 3)) == 3
    assert len(SqlFolderLookup(session_factory).fetch_by_organization(VALID_ORG_ID)) == 3
