# pylint: disable=redefined-outer-name
import logging

import pytest

from shred.identifier import AtomIdentifier, get_default_identifier
from shred.nuclide import ElementCollection

logging.basicConfig(level=logging.ERROR)


@pytest.fixture(scope="session")
def atom_identifier() -> AtomIdentifier:
    return get_default_identifier()


@pytest.fixture(scope="session")
def element_collection(atom_identifier: AtomIdentifier) -> ElementCollection:
    return atom_identifier.elements


@pytest.fixture(scope="session")
def output_dir(tmp_path_factory) -> str:
    return f"{tmp_path_factory.mktemp('output')}/"
