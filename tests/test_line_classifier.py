# tests/test_line_classifier.py
"""Line classifier (sagre/importer/lines.py): lines → (label, value) pairs."""
from __future__ import annotations

from sagre.importer.lines import DESCRIPTION, TITLE, ClassifiedLine, classify_block


def _pairs(lines):
    return [(c.label, c.value) for c in classify_block(lines)]


class TestClassifyBlock:
    def test_title_brackets_are_stripped(self):
        assert _pairs(["[Sagra della Castagna]"]) == [(TITLE, "Sagra della Castagna")]

    def test_title_needs_closing_bracket(self):
        assert _pairs(["[Sagra senza chiusura"]) == []

    def test_inner_brackets_survive(self):
        assert _pairs(["[Festa [edizione 2025]]"]) == [(TITLE, "Festa [edizione 2025]")]

    def test_label_values_are_trimmed(self):
        assert _pairs(["  Orario:   19:00  "]) == [("Orario:", "19:00")]

    def test_value_keeps_inner_colons(self):
        assert _pairs(["URL Google Maps: https://maps.google.com/x"]) == [
            ("URL Google Maps:", "https://maps.google.com/x"),
        ]

    def test_unknown_lines_are_ignored(self):
        assert _pairs(["Note: qualcosa", "testo libero", ""]) == []

    def test_description_swallows_the_rest_of_the_block(self):
        lines = ["Orario: 19:00", "Descrizione:", "Prima riga", "Costo: 5€", "  ultima  "]
        assert _pairs(lines) == [
            ("Orario:", "19:00"),
            (DESCRIPTION, "Prima riga Costo: 5€ ultima"),
        ]

    def test_output_is_classified_line(self):
        out = list(classify_block(["Mese: agosto"]))
        assert out == [ClassifiedLine("Mese:", "agosto")]

    def test_repeated_labels_are_all_emitted_in_order(self):
        assert _pairs(["Mese: luglio", "Mese: agosto"]) == [
            ("Mese:", "luglio"),
            ("Mese:", "agosto"),
        ]
