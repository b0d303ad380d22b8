from __future__ import annotations

from typing import Dict

from ..core.types import Locale

# ============================================================
# NEPALI (Devanagari)
# ============================================================

NEPALI = Locale(
    code="ne",
    name="Nepali",
    digits=("०", "१", "२", "३", "४", "५", "६", "७", "८", "९"),
    bs_months=(
        "बैशाख", "जेठ", "असार", "श्रावण", "भदौ", "असोज",
        "कार्तिक", "मंसिर", "पुष", "माघ", "फागुन", "चैत्र",
    ),
    ad_months=(
        "जनवरी", "फेब्रुअरी", "मार्च", "अप्रिल", "मे", "जुन",
        "जुलाई", "अगस्ट", "सेप्टेम्बर", "अक्टोबर", "नोभेम्बर", "डिसेम्बर",
    ),
    weekdays=("आइतबार", "सोमबार", "मंगलबार", "बुधबार", "बिहिबार", "शुक्रबार", "शनिबार"),
    just_now="भर्खरै",
    minutes_ago="{n} मिनेट अघि",
    hours_ago="{n} घण्टा अघि",
    yesterday="हिजो",
    days_ago="{n} दिन अघि",
    last_week="गत हप्ता",
    weeks_ago="{n} हप्ता अघि",
    last_month="गत महिना",
    months_ago="{n} महिना अघि",
)

# ============================================================
# ENGLISH (romanized month names, ASCII digits)
# ============================================================

ENGLISH = Locale(
    code="en",
    name="English",
    digits=tuple("0123456789"),
    bs_months=(
        "Baisakh", "Jestha", "Ashadh", "Shrawan", "Bhadra", "Ashwin",
        "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
    ),
    ad_months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    weekdays=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    just_now="just now",
    minutes_ago="{n} minutes ago",
    hours_ago="{n} hours ago",
    yesterday="yesterday",
    days_ago="{n} days ago",
    last_week="last week",
    weeks_ago="{n} weeks ago",
    last_month="last month",
    months_ago="{n} months ago",
)

ALL_LOCALES: Dict[str, Locale] = {loc.code: loc for loc in (NEPALI, ENGLISH)}
