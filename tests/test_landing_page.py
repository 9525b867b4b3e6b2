from frontend.dashboard.landing_page import CTA_PATH, FEATURES, HERO_TITLE, STATS


def test_landing_content():
    assert HERO_TITLE == "Enterprise-Grade Database Solutions"
    assert [f["title"] for f in FEATURES] == [
        "Advanced Security",
        "Optimized Schema",
        "Automated Backups",
        "Multi-Tenant",
        "Document Security",
        "Real-Time Ready",
    ]
    assert STATS == [
        ("99.99%", "Uptime"),
        ("256-bit", "Encryption"),
        ("30 Days", "Backup Retention"),
        ("24/7", "Support"),
    ]
    assert CTA_PATH == "/auth"
