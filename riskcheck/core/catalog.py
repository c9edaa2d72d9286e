"""
Question Catalog — The fixed set of quiz questions.

Loaded once at import; catalog order is also the evaluation order of the
scoring engine and the tie-break order for findings of equal weight.
"""

from __future__ import annotations

from riskcheck.models.quiz_models import Category, Question

# Answer id used by the quiz flow to carry the postal code; never a catalog question
PLZ_ANSWER_ID = "plz_input"

_URLS = {
    "QOLSYS": "https://www.blockalarm.de/qolsys-iq-panel-4/",
    "OUTDOOR": "https://www.blockalarm.de/alarmanlage-aussenbereich/",
    "VIDEO": "https://www.blockalarm.de/videoueberwachung/",
    "COMMERCIAL": "https://www.blockalarm.de/gewerbe-alarmanlagen/",
    "HOUSE": "https://www.blockalarm.de/haus-alarmanlage/",
    "SERVICE": "https://www.blockalarm.de/aufschaltung-leitstelle/",
    "MECHANICAL": "https://www.blockalarm.de/sicherheitstechnik/",
    "SMARTHOME": "https://www.blockalarm.de/alarm-smart-home/",
    "SECURITY_CHECK": "https://www.blockalarm.de/alarmanlage-kosten/",
    "ACCESS_CONTROL": "https://www.blockalarm.de/gewerbe-alarmanlagen/",
}


QUESTIONS: tuple[Question, ...] = (
    # ── Grundstück & Perimeter ──
    Question(
        id="q_per_1",
        category=Category.PERIMETER,
        text="Ist Ihr Grundstück vollständig umfriedet (Zaun, Mauer) und gegen Übersteigen gesichert?",
        subtext="Offene Grundstücke ermöglichen Tätern das unbemerkte Auskundschaften und Betreten.",
        weight=3,
        risk_answer=False,
        recommendation="Errichten Sie eine klare physische Barriere, um Gelegenheitstäter abzuschrecken.",
        product_match="Außenhautüberwachung",
        product_url=_URLS["OUTDOOR"],
    ),
    Question(
        id="q_per_2",
        category=Category.PERIMETER,
        text="Bietet Ihr Grundstück viele unübersichtliche Ecken, dichte Hecken oder Sichtschutzwände?",
        subtext="Einbrecher nutzen Deckung, um ungestört arbeiten zu können.",
        weight=4,
        risk_answer=True,
        recommendation="Reduzieren Sie Sichtbarrieren oder überwachen Sie tote Winkel elektronisch.",
        product_match="Videoüberwachung Außenbereich",
        product_url=_URLS["VIDEO"],
    ),
    # ── Beleuchtung & Sicht ──
    Question(
        id="q_light_1",
        category=Category.LIGHTING,
        text="Ist eine Bewegungsmelder-gesteuerte Außenbeleuchtung vorhanden?",
        subtext="Plötzliches Licht stört Täter empfindlich und alarmiert Nachbarn.",
        weight=3,
        risk_answer=False,
        recommendation="Licht schreckt ab. Installieren Sie LED-Strahler mit Bewegungssensoren an allen Zugängen.",
        product_match="Gefahrenmeldeanlage mit Lichtsteuerung",
        product_url=_URLS["QOLSYS"],
    ),
    Question(
        id="q_light_2",
        category=Category.LIGHTING,
        text="Sind Hausnummer und Eingangsbereich auch nachts gut sichtbar beleuchtet?",
        subtext="Wichtig für Polizei und Rettungskräfte im Ernstfall, um Ihr Objekt schnell zu finden.",
        weight=1,
        risk_answer=False,
        recommendation="Sorgen Sie für schnelle Auffindbarkeit durch Sicherheitskräfte im Alarmfall.",
        product_match="Basisschutz für Immobilien",
        product_url=_URLS["HOUSE"],
    ),
    # ── Zugänge & Gebäudehülle ──
    Question(
        id="q_acc_1",
        category=Category.ACCESS,
        text="Verfügen Fenster und Terrassentüren über pilzkopfverriegelte Beschläge (mind. RC2)?",
        subtext="Standard-Zapfen lassen sich mit einem Schraubendreher in wenigen Sekunden aufhebeln.",
        weight=5,
        risk_answer=False,
        recommendation="Rüsten Sie mechanische Sicherungen nach oder sichern Sie Fenster elektronisch ab.",
        product_match="Glasbruch & Öffnungsmelder",
        product_url=_URLS["QOLSYS"],
    ),
    Question(
        id="q_acc_2",
        category=Category.ACCESS,
        text="Gibt es Nebeneingänge, Kellerfenster oder Lichtschächte, die nicht extra gesichert sind?",
        subtext="Diese Bereiche sind oft schlecht einsehbar und daher beliebte Einstiegspunkte.",
        weight=4,
        risk_answer=True,
        recommendation="Sichern Sie Lichtschächte gegen Abheben und vergittern Sie Kellerfenster.",
        product_match="Elektronische Außenhautsicherung",
        product_url=_URLS["OUTDOOR"],
    ),
    Question(
        id="q_acc_3",
        category=Category.ACCESS,
        text="Befinden sich Kletterhilfen (Mülltonnen, Rankgitter, Carports) nahe am Gebäude?",
        subtext="Täter gelangen so leicht auf Balkone oder an Fenster im 1. Stock.",
        weight=3,
        risk_answer=True,
        recommendation="Entfernen Sie Aufstiegshilfen, die den Einstieg in obere Etagen erleichtern.",
        product_match="Vorwarn-Systeme",
        product_url=_URLS["QOLSYS"],
    ),
    # ── Mechanischer Schutz ──
    Question(
        id="q_mech_1",
        category=Category.MECHANICS,
        text="Ist der Profilzylinder der Eingangstür bündig mit dem Beschlag (kein Überstand > 3mm)?",
        subtext='Überstehende Zylinder können leicht abgebrochen werden ("Zieh-Methode").',
        weight=3,
        risk_answer=False,
        recommendation="Installieren Sie einen Sicherheitsbeschlag mit Zylinderschutz.",
        product_match="Sicherheitstechnik",
        product_url=_URLS["MECHANICAL"],
    ),
    Question(
        id="q_mech_2",
        category=Category.MECHANICS,
        text="Verfügt Ihre Eingangstür über eine Mehrfachverriegelung?",
        subtext="Einfache Schlösser bieten kaum Widerstand gegen körperliche Gewalt (Eintreten).",
        weight=3,
        risk_answer=False,
        recommendation="Nutzen Sie Schwenkriegelschlösser für erhöhten Aufbruchwiderstand.",
        product_match="Sicherheitstechnik",
        product_url=_URLS["MECHANICAL"],
    ),
    # ── Elektronische Sicherheit ──
    Question(
        id="q_elec_1",
        category=Category.ELECTRONICS,
        text="Ist bereits eine Einbruchmeldeanlage (Alarmanlage) installiert?",
        subtext="Studien belegen: Sichtbare Alarmanlagen vertreiben Einbrecher in den meisten Fällen sofort.",
        weight=5,
        risk_answer=False,
        recommendation="Eine VdS-konforme Alarmanlage ist der effektivste Schutz bei Abwesenheit.",
        product_match="Qolsys IQ Panel 4",
        product_url=_URLS["QOLSYS"],
    ),
    Question(
        id="q_elec_2",
        category=Category.ELECTRONICS,
        text="Ist Ihre Anlage auf eine 24/7 Notruf- und Serviceleitstelle (NSL) aufgeschaltet?",
        subtext="Ein lokaler Alarm wird oft von Nachbarn ignoriert oder nicht gehört.",
        weight=5,
        risk_answer=False,
        recommendation="Nur eine Aufschaltung garantiert professionelle Intervention rund um die Uhr.",
        product_match="24h Fernüberwachung",
        product_url=_URLS["SERVICE"],
    ),
    Question(
        id="q_elec_3",
        category=Category.ELECTRONICS,
        text="Gibt es eine Videoüberwachung mit Aufzeichnung und Fernzugriff?",
        subtext="Videoüberwachung dient der Täterabschreckung und Beweissicherung.",
        weight=3,
        risk_answer=False,
        recommendation="Videoüberwachung hilft bei der Täteridentifizierung und Alarmverifikation.",
        product_match="Videoüberwachung & KI",
        product_url=_URLS["VIDEO"],
    ),
    # ── Organisation ──
    Question(
        id="q_org_1",
        category=Category.ORGANIZATION,
        text="Haben Sie eine klare Übersicht, wer alles Schlüssel zu Ihrem Objekt besitzt?",
        subtext="Verlorene oder unkontrollierte Schlüssel sind ein hohes Sicherheitsrisiko.",
        weight=2,
        risk_answer=False,
        recommendation="Tauschen Sie Schließzylinder aus, wenn Schlüssel verloren gegangen sind.",
        product_match="Zutrittskontrolle",
        product_url=_URLS["ACCESS_CONTROL"],
    ),
    Question(
        id="q_org_2",
        category=Category.ORGANIZATION,
        text="Schließen Sie auch bei kurzer Abwesenheit alle Fenster und Türen komplett ab?",
        subtext="Gekippte Fenster sind offene Fenster. Versicherungen zahlen hier oft nicht.",
        weight=4,
        risk_answer=False,
        recommendation='Gewöhnen Sie sich eine strikte Verschlussroutine an ("Konsequentes Handeln").',
        product_match="Scharfschaltung Automatik",
        product_url=_URLS["SMARTHOME"],
    ),
    # ── Wertsachen & Risiko ──
    Question(
        id="q_val_1",
        category=Category.VALUABLES,
        text="Werden Bargeld, Schmuck oder sensible Daten offen aufbewahrt?",
        subtext="Gelegenheit macht Diebe – auch bei flüchtigen Einbrüchen zählen Sekunden.",
        weight=4,
        risk_answer=True,
        recommendation="Nutzen Sie zertifizierte Wertschutzschränke (Tresore) für Wertsachen.",
        product_match="Objektschutz & Alarm",
        product_url=_URLS["COMMERCIAL"],
    ),
    Question(
        id="q_val_2",
        category=Category.VALUABLES,
        text="Ist Ihr Objekt bei Abwesenheit (Urlaub/Wochenende) als unbewohnt erkennbar?",
        subtext='Überfüllte Briefkästen oder dauerhaft dunkle Fenster signalisieren "Freie Bahn".',
        weight=3,
        risk_answer=True,
        recommendation="Simulieren Sie Anwesenheit durch Zeitschaltuhren oder Smart-Home-Lösungen.",
        product_match="Smarthome Simulation",
        product_url=_URLS["SMARTHOME"],
    ),
)


SECURITY_CHECK_URL = _URLS["SECURITY_CHECK"]
