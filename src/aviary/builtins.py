## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from . import combinators as C
from .library import Catalog


# Symbol, ASCII name, bird, lambda definition.  Each body is read left-associatively with
# juxtaposition as composition, so `λabc.acb` is built as `compose(compose(a, c), b)`.
BIRDS = [
    ('B',     'B',           'Bluebird',                     'λabc.a(bc)'),
    ('B¹',    'B1',          'Blackbird',                    'λabcd.a(bcd)'),
    ('B²',    'B2',          'Bunting',                      'λabcde.a(bcde)'),
    ('B³',    'B3',          'Becard',                       'λabcd.a(b(cd))'),
    ('C',     'C',           'Cardinal',                     'λabc.acb'),
    ('D',     'D',           'Dove',                         'λabcd.ab(cd)'),
    ('D¹',    'D1',          'Dickcissel',                   'λabcde.abc(de)'),
    ('D²',    'D2',          'Dovekies',                     'λabcde.a(bc)(de)'),
    ('E',     'E',           'Eagle',                        'λabcde.ab(cde)'),
    ('Ê',     'E_hat',       'Bald Eagle',                   'λabcdefg.a(bcd)(efg)'),
    ('F',     'F',           'Finch',                        'λabc.cba'),
    ('G',     'G',           'Goldfinch',                    'λabcd.ad(bc)'),
    ('H',     'H',           'Hummingbird',                  'λabc.abcb'),
    ('I',     'I',           'Identity Bird',                'λa.a'),
    ('J',     'J',           'Jay',                          'λabcd.ab(adc)'),
    ('K',     'K',           'Kestrel',                      'λab.a'),
    ('L',     'L',           'Lark',                         'λab.a(bb)'),
    ('M',     'M',           'Mockingbird',                  'λa.aa'),
    ('M²',    'M2',          'Double Mockingbird',           'λab.ab(ab)'),
    ('O',     'O',           'Owl',                          'λab.b(ab)'),
    ('Q',     'Q',           'Queer Bird',                   'λabc.b(ac)'),
    ('Q¹',    'Q1',          'Quixotic Bird',                'λabc.a(cb)'),
    ('Q²',    'Q2',          'Quizzical Bird',               'λabc.b(ca)'),
    ('Q³',    'Q3',          'Quirky Bird',                  'λabc.c(ab)'),
    ('Q⁴',    'Q4',          'Quacky Bird',                  'λabc.c(ba)'),
    ('R',     'R',           'Robin',                        'λabc.bca'),
    ('S',     'S',           'Starling',                     'λabc.ac(bc)'),
    ('T',     'T',           'Thrush',                       'λab.ba'),
    ('U',     'U',           'Turing',                       'λab.b(aab)'),
    ('V',     'V',           'Vireo',                        'λabc.cab'),
    ('W',     'W',           'Warbler',                      'λab.abb'),
    ('W¹',    'W1',          'Converse Warbler',             'λab.baa'),
    ('I*',    'I_star',      'Identity Bird Once Removed',   'λab.ab'),
    ('W*',    'W_star',      'Warbler Once Removed',         'λabc.abcc'),
    ('C*',    'C_star',      'Cardinal Once Removed',        'λabcd.abdc'),
    ('R*',    'R_star',      'Robin Once Removed',           'λabcd.acdb'),
    ('F*',    'F_star',      'Finch Once Removed',           'λabcd.adcb'),
    ('V*',    'V_star',      'Vireo Once Removed',           'λabcd.acbd'),
    ('I**',   'I_star_star', 'Identity Bird Twice Removed',  'λabc.abc'),
    ('W**',   'W_star_star', 'Warbler Twice Removed',        'λabcd.abcdd'),
    ('C**',   'C_star_star', 'Cardinal Twice Removed',       'λabcde.abced'),
    ('R**',   'R_star_star', 'Robin Twice Removed',          'λabcde.abdec'),
    ('F**',   'F_star_star', 'Finch Twice Removed',          'λabcde.abedc'),
    ('V**',   'V_star_star', 'Vireo Twice Removed',          'λabcde.abecd'),
    ('KI',    'KI',          'Kite',                         'λab.b'),
    ('KM',    'KM',          'Constant Mocker',              'λab.bb'),
    ('C(KM)', 'CKM',         'Crossed Constant Mocker',      'λab.aa'),
]


def load_builtins_catalog() -> Catalog:
    catalog = Catalog()

    for symbol, ascii_name, bird, source in BIRDS:
        catalog.add_combinator(symbol, bird, source, ascii_name=ascii_name)

    # Fixed points and the infinite loop are built by hand, not from a finite body.
    catalog.add_special('Y', 'Why Bird', 'λa.a(λa)', C.fix_y, returns='a ∘ a ∘ a ∘ …')
    catalog.add_special('Θ', 'Theta', '(λab.b(aab))(λab.b(aab))', C.fix_theta, ascii_name='Theta', returns='a ∘ a ∘ a ∘ …')
    catalog.add_special('Ω', 'Omega', 'λ', C.omega, ascii_name='Omega', returns='infinite loop')

    catalog.ensure_consistent()
    return catalog
