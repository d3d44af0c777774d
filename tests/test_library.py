## aviary — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from aviary.library import Catalog
from aviary.builtins import BIRDS, load_builtins_catalog
from aviary.combinators import Combinator, SpecialForm
from aviary.errors import CombinatorNameError


@pytest.fixture(scope='module')
def catalog():
    return load_builtins_catalog()


def test_catalog_holds_every_bird(catalog):
    assert len(catalog) == len(BIRDS) + 3
    assert all(isinstance(e, Combinator) for e in catalog if e.symbol not in ('Y', 'Θ', 'Ω'))
    assert isinstance(catalog['Y'], SpecialForm)

@pytest.mark.parametrize("name", ['B¹', 'B1', 'blackbird', 'Blackbird', 'BLACKBIRD'])
def test_catalog_resolves_aliases(catalog, name):
    assert catalog.get(name).symbol == 'B¹'

def test_catalog_symbols_with_punctuation(catalog):
    assert catalog['C(KM)'] is catalog['CKM']
    assert catalog['I**'] is catalog['I_star_star']
    assert catalog['Ê'].name == 'Bald Eagle'

def test_catalog_membership(catalog):
    assert 'Bluebird' in catalog
    assert 'Θ' in catalog
    assert 'Dodo' not in catalog

def test_catalog_unknown_name(catalog):
    with pytest.raises(CombinatorNameError) as info:
        catalog.get('Dodo')
    assert isinstance(info.value, NameError)
    assert info.value.aviary_token == 'Dodo'

def test_catalog_arities(catalog):
    assert catalog['I'].arity == 1
    assert catalog['Ê'].arity == 7
    assert catalog['Θ'].arity == 1
    assert catalog['Ω'].arity == 0

def test_catalog_rejects_duplicates():
    cat = Catalog()
    cat.add_combinator('B', 'Bluebird', 'λabc.a(bc)')
    with pytest.raises(CombinatorNameError):
        cat.add_combinator('B', 'Bluebird', 'λabc.a(bc)')

def test_catalog_custom_entry():
    cat = Catalog()
    twice = cat.add_combinator('Tw', 'Twice', 'λab.a(a(b))', ascii_name='Twice')
    cat.ensure_consistent()
    assert cat.get('twice') is twice
    assert twice(lambda x: x + 1, lambda x: x * 10)(2) == 22
