import pytest
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from configs.settings import BUNDLED_KNOWLEDGE_PATH


@pytest.fixture
def bundled_document_path():
    return BUNDLED_KNOWLEDGE_PATH


@pytest.fixture
def bundled_document_text():
    return BUNDLED_KNOWLEDGE_PATH.read_text(encoding="utf-8")


@pytest.fixture
def slang_section():
    return """
🗣️ Andhra Slang Intelligence

"Arey Baboi"
Literal: Oh my God
Emotional meaning: Shock / frustration / disbelief
Usage: Informal
Avoid in formal settings
"""


@pytest.fixture
def complete_document():
    return """
🗣️ Andhra Slang Intelligence

"Lite Teesko"
Literal: Take it light
Emotional meaning: Chill, do not stress
Usage: Casual advice

🍗 Andhra Street Food Culture

Visakhapatnam (Vizag)
Punugulu → medium spice, evening snack
Vijayawada
Pesarattu → mild, breakfast
Guntur
Mirchi Bajji → extreme heat
Tirupati
Curd Rice → mild, lunch

🎉 Festivals of Andhra Pradesh

Ugadi
Telugu new year festival
Foods: Ugadi Pachadi, Bobbatlu

❤️ Emotional Food Mapping

Sad → Pappu + Avakaya (Comfort, nostalgia)
Sick → Rasam (Healing)
Happy → Biryani (Celebration)
Angry → Curd Rice (Cooling)
Tired → Coffee with Punugulu (Energy)
"""


@pytest.fixture
def incomplete_document(complete_document):
    return complete_document.replace("Tired → Coffee with Punugulu (Energy)\n", "")


@pytest.fixture
def evening_clock():
    return lambda: datetime(2024, 1, 14, 17, 30)
