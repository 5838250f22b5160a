"""
Shared fixtures for directory tests
"""
import pytest

from domain.models.company import Company


@pytest.fixture
def alpha_beta():
    """Two-company collection used by the reference scenarios"""
    return [
        Company(
            name="Alpha Marine",
            description="transport",
            sectors=("Transport",),
            headquarters="Alger",
        ),
        Company(
            name="Beta Port",
            description="services portuaires",
            sectors=("Services",),
            headquarters="Oran",
        ),
    ]


@pytest.fixture
def fleet():
    """Wider collection with accents, shared sectors and a missing website"""
    return [
        Company("Hyproc Shipping Company", "Transport de GNL et de brut", ("Transport maritime", "Hydrocarbures"), "Oran"),
        Company("EP Béjaïa", "Manutention et terminaux à conteneurs", ("Services portuaires", "Logistique"), "Béjaïa", "https://www.portdebejaia.dz"),
        Company("CNAN Nord", "Lignes conteneurs en Méditerranée", ("Transport maritime", "Logistique"), "Alger"),
        Company("EP Annaba", "Vracs minéraliers", ("Services portuaires",), "Annaba"),
        Company("Chantier Naval", "Réparation navale et carénage", ("Construction navale",), "Oran"),
        Company("Sans Secteur", "Bureau d'études portuaires", (), "Alger"),
    ]
