# sagre/seed.py
# Bundled default catalog, used when the store is empty or unreadable.
from __future__ import annotations

from sagre.models import Event

SEED_EVENTS = [
    {
        'id': 'sagra-limone-massa-lubrense',
        'title': 'Sagra del Limone',
        'startDate': '2025-07-10',
        'endDate': '2025-07-13',
        'location': 'Massa Lubrense (NA)',
        'address': 'Centro storico, Massa Lubrense',
        'time': '19:00 - 24:00',
        'month': 'luglio',
        'category': 'penisola',
        'description': "Quattro giorni dedicati al limone di Massa Lubrense IGP con percorsi degustativi nei limoneti, dolci tipici, liquori e spettacoli folk.",
        'cost': 'Ingresso gratuito',
        'organizer': 'Comune di Massa Lubrense',
        'tags': ['Limoni IGP', 'Cucina tipica', 'Artigianato'],
        'mapUrl': 'https://maps.google.com/search/Massa+Lubrense+centro+storico',
        'featured': True,
        'hasFood': True,
        'hasMusic': True,
        'hasFreeEntry': True,
        'hasTicketTasting': False,
        'hasFireworks': True,
    },
    {
        'id': 'festa-alici-cetara',
        'title': "Festa delle Alici e della Colatura",
        'startDate': '2025-07-25',
        'endDate': '2025-07-27',
        'location': 'Cetara (SA)',
        'address': 'Lungomare di Cetara',
        'time': 'Dalle 20:00',
        'month': 'luglio',
        'category': 'costiera',
        'description': "Le alici di Cetara in tutte le versioni, con la colatura protagonista. Degustazioni sul lungomare e musica dal vivo.",
        'cost': 'Ticket degustazione 15€',
        'organizer': 'Pro Loco Cetara',
        'tags': ['Alici', 'Colatura', 'Pesce'],
        'mapUrl': 'https://maps.google.com/search/Lungomare+Cetara',
        'featured': False,
        'hasFood': True,
        'hasMusic': True,
        'hasFreeEntry': True,
        'hasTicketTasting': True,
        'hasFireworks': False,
    },
    {
        'id': 'sagra-gnocchi-sorrento',
        'title': 'Sagra degli Gnocchi alla Sorrentina',
        'startDate': '2025-08-02',
        'endDate': '2025-08-04',
        'location': 'Sant\'Agnello (NA)',
        'address': 'Piazza Matteotti, Sant\'Agnello',
        'time': '19:30 - 23:30',
        'month': 'agosto',
        'category': 'penisola',
        'description': "Gnocchi fatti a mano con pomodoro, mozzarella e basilico, preparati dalle famiglie del paese.",
        'cost': 'Piatti da 5€',
        'organizer': 'Associazione Amici di Sant\'Agnello',
        'tags': ['Gnocchi', 'Cucina tipica'],
        'mapUrl': 'https://maps.google.com/search/Piazza+Matteotti+Sant+Agnello',
        'featured': False,
        'hasFood': True,
        'hasMusic': False,
        'hasFreeEntry': True,
        'hasTicketTasting': False,
        'hasFireworks': False,
    },
    {
        'id': 'festa-pesce-amalfi',
        'title': 'Festa del Pesce Azzurro',
        'startDate': '2025-08-14',
        'endDate': '2025-08-16',
        'location': 'Amalfi (SA)',
        'address': 'Porto di Amalfi',
        'time': 'Tutte le sere dalle 20:00',
        'month': 'agosto',
        'category': 'costiera',
        'description': "Frittura di pesce azzurro, musica popolare e fuochi d'artificio sul mare per Ferragosto.",
        'cost': 'Ingresso gratuito',
        'organizer': 'Comitato Festeggiamenti Amalfi',
        'tags': ['Pesce', 'Ferragosto', 'Fuochi'],
        'mapUrl': 'https://maps.google.com/search/Porto+di+Amalfi',
        'featured': True,
        'hasFood': True,
        'hasMusic': True,
        'hasFreeEntry': True,
        'hasTicketTasting': False,
        'hasFireworks': True,
    },
    {
        'id': 'sagra-provola-agerola',
        'title': 'Sagra della Provola e del Fiordilatte',
        'startDate': '2025-09-05',
        'endDate': '2025-09-07',
        'location': 'Agerola (NA)',
        'address': 'Località Bomerano, Agerola',
        'time': '18:00 - 24:00',
        'month': 'settembre',
        'category': 'costiera',
        'description': "I latticini dei Monti Lattari: provola affumicata, fiordilatte e caciocavallo con visite ai caseifici.",
        'cost': 'Ingresso gratuito',
        'organizer': 'Pro Loco Agerola',
        'tags': ['Latticini', 'Provola', 'Monti Lattari'],
        'mapUrl': 'https://maps.google.com/search/Bomerano+Agerola',
        'featured': False,
        'hasFood': True,
        'hasMusic': True,
        'hasFreeEntry': True,
        'hasTicketTasting': False,
        'hasFireworks': False,
    },
    {
        'id': 'festa-uva-vico-equense',
        'title': "Festa dell'Uva",
        'startDate': '2025-09-19',
        'endDate': '2025-09-21',
        'location': 'Vico Equense (NA)',
        'address': 'Frazione Moiano, Vico Equense',
        'time': 'Dalle 18:00',
        'month': 'settembre',
        'category': 'penisola',
        'description': "Vendemmia in piazza con pigiatura dell'uva, vino novello e prodotti delle colline vicane.",
        'cost': 'Ticket degustazione 10€',
        'organizer': 'Associazione Moiano in Festa',
        'tags': ['Vino', 'Uva', 'Vendemmia'],
        'mapUrl': 'https://maps.google.com/search/Moiano+Vico+Equense',
        'featured': False,
        'hasFood': True,
        'hasMusic': True,
        'hasFreeEntry': True,
        'hasTicketTasting': True,
        'hasFireworks': False,
    },
    {
        'id': 'sagra-castagna-montella',
        'title': 'Sagra della Castagna',
        'startDate': '2025-10-31',
        'endDate': '2025-11-02',
        'location': 'Montella (AV)',
        'address': 'Centro storico, Montella',
        'time': '10:00 - 24:00',
        'month': 'oltre',
        'category': 'oltre',
        'description': "La castagna di Montella IGP in caldarroste, dolci e primi piatti, con trekking nei castagneti.",
        'cost': 'Ingresso gratuito',
        'organizer': 'Pro Loco Montella',
        'tags': ['Castagne IGP', 'Trekking', 'Autunno'],
        'mapUrl': 'https://maps.google.com/search/Montella+centro+storico',
        'featured': True,
        'hasFood': True,
        'hasMusic': True,
        'hasFreeEntry': True,
        'hasTicketTasting': False,
        'hasFireworks': False,
    },
]


def seed_events() -> list[Event]:
    """Fresh Event objects for the bundled catalog."""
    return [Event.model_validate(item) for item in SEED_EVENTS]
