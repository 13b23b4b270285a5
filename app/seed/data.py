"""Reference data inserted on startup: markets, holiday-home operators and launch articles."""

# (name, slug, properties_count, avg_daily_rate, occupancy_rate, image_url, is_featured)
LOCATIONS = (
    ("Palm Jumeirah", "palm-jumeirah", 12400, 1850, 68, "/market_palm_aerial.jpg", True),
    ("Downtown Dubai", "downtown-dubai", 9800, 1420, 72, "/market_downtown_aerial.jpg", True),
    ("Dubai Marina", "dubai-marina", 14200, 980, 66, "/market_marina_aerial.jpg", True),
    ("JBR", "jbr", 8600, 1100, 70, "/market_jbr_aerial.jpg", True),
    ("Arabian Ranches", "arabian-ranches", 5400, 1650, 58, "/market_ranches_aerial.jpg", True),
    ("Business Bay", "business-bay", 10100, 890, 64, "/market_businessbay_aerial.jpg", True),
)

# Cover image stem per location slug.
COVER_IMAGES = {
    "palm-jumeirah": "palm",
    "downtown-dubai": "downtown",
    "dubai-marina": "marina",
    "jbr": "jbr",
    "arabian-ranches": "ranches",
    "business-bay": "creek",
}

TIER_1 = "Tier 1 - Major Operators"
TIER_2 = "Tier 2 - Established"
TIER_3 = "Tier 3 - Growing"

# (name, slug, listings_count, tier, is_featured, rating, review_count, founded_year, location slug)
MANAGERS = (
    ("Deluxe Holiday Homes", "deluxe-holiday-homes", 800, TIER_1, True, 4.9, 245, 2015, "downtown-dubai"),
    ("Infinity Keys Holiday Homes", "infinity-keys-holiday-homes", 600, TIER_1, True, 4.8, 198, 2016, "dubai-marina"),
    ("Guesty", "guesty", 500, TIER_1, True, 4.8, 312, 2013, "downtown-dubai"),
    ("MasterHost", "masterhost", 300, TIER_1, False, 4.7, 156, 2017, "business-bay"),
    ("Bespoke Holiday Homes", "bespoke-holiday-homes", 300, TIER_1, False, 4.6, 134, 2014, "palm-jumeirah"),
    ("Sonder", "sonder", 250, TIER_1, False, 4.7, 289, 2012, "downtown-dubai"),
    ("GuestReady", "guestready", 200, TIER_1, False, 4.6, 178, 2016, "downtown-dubai"),
    ("Apricus Holiday Homes", "apricus-holiday-homes", 170, TIER_2, False, 4.5, 98, 2015, "dubai-marina"),
    ("New Arabian Holiday Homes", "new-arabian-holiday-homes", 165, TIER_2, False, 4.5, 112, 2014, "downtown-dubai"),
    ("Key One Holiday Homes", "key-one-holiday-homes", 150, TIER_2, False, 4.4, 87, 2016, "dubai-marina"),
    ("Frank Porter", "frank-porter", 150, TIER_2, False, 4.7, 203, 2015, "downtown-dubai"),
    ("Blueground", "blueground", 150, TIER_2, False, 4.5, 167, 2013, "business-bay"),
    ("Hostmaker", "hostmaker", 150, TIER_2, False, 4.4, 145, 2014, "downtown-dubai"),
    ("LUX Holiday Home", "lux-holiday-home", 150, TIER_2, False, 4.6, 134, 2016, "palm-jumeirah"),
    ("Silkhaus", "silkhaus", 120, TIER_2, False, 4.5, 89, 2017, "business-bay"),
    ("Nox Holiday Homes", "nox-holiday-homes", 109, TIER_2, False, 4.4, 76, 2015, "dubai-marina"),
    ("Castles Holiday Homes", "castles-holiday-homes", 107, TIER_2, False, 4.3, 67, 2014, "palm-jumeirah"),
    ("Livbnb", "livbnb", 107, TIER_2, False, 4.4, 78, 2016, "dubai-marina"),
    ("Exclusive Links Vacation Homes", "exclusive-links-vacation-homes", 100, TIER_2, False, 4.5, 92, 2013, "palm-jumeirah"),
    ("AirDXB", "airdxb", 100, TIER_2, False, 4.4, 87, 2015, "downtown-dubai"),
    ("Homevy", "homevy", 100, TIER_2, False, 4.3, 71, 2016, "jbr"),
    ("Airstay Holiday Homes", "airstay-holiday-homes", 100, TIER_2, False, 4.4, 83, 2015, "dubai-marina"),
    ("StayBetterDXB", "staybetterdxb", 95, TIER_3, False, 4.5, 68, 2017, "business-bay"),
    ("Vacationer Holiday Homes", "vacationer-holiday-homes", 90, TIER_3, False, 4.3, 56, 2016, "jbr"),
    ("HiGuests", "higuests", 80, TIER_3, False, 4.4, 72, 2017, "dubai-marina"),
    ("Pass the Keys", "pass-the-keys", 80, TIER_3, False, 4.5, 89, 2015, "downtown-dubai"),
    ("Staycae", "staycae", 80, TIER_3, False, 4.2, 54, 2016, "dubai-marina"),
    ("One Perfect Stay", "one-perfect-stay", 70, TIER_3, False, 4.4, 67, 2015, "downtown-dubai"),
    ("My Room Holiday Homes Rental", "my-room-holiday-homes", 61, TIER_3, False, 4.1, 43, 2017, "jbr"),
    ("Airsorted", "airsorted", 60, TIER_3, False, 4.3, 58, 2014, "downtown-dubai"),
    ("fäm Living Holiday Homes", "fam-living", 60, TIER_3, False, 4.2, 49, 2016, "business-bay"),
    ("TRPS Vacation Homes Rental", "trps-vacation-homes", 59, TIER_3, False, 4.1, 38, 2017, "arabian-ranches"),
    ("Island Vacation Homes", "island-vacation-homes", 59, TIER_3, False, 4.0, 42, 2016, "palm-jumeirah"),
    ("Shosty", "shosty", 50, TIER_3, False, 4.2, 47, 2017, "dubai-marina"),
    ("Eastern Coast Holiday Homes", "eastern-coast", 50, TIER_3, False, 4.0, 35, 2016, "palm-jumeirah"),
    ("Tadabeer Homes", "tadabeer-homes", 50, TIER_3, False, 4.1, 41, 2017, "arabian-ranches"),
)

DEFAULT_SERVICES = (
    "Property Marketing",
    "Guest Communication",
    "Professional Cleaning",
    "Maintenance",
    "Dynamic Pricing",
    "24/7 Support",
)

# (title, slug, excerpt, content, featured_image, category, days before first seed)
BLOG_POSTS = (
    (
        "How to Choose the Right Airbnb Manager in Dubai",
        "choosing-airbnb-manager-dubai",
        "Finding the perfect property manager can make or break your short-term rental business.",
        "<h2>Why You Need a Professional Airbnb Manager</h2>"
        "<p>Managing a short-term rental property in Dubai requires significant time, expertise, and local knowledge.</p>",
        "/blog-1.jpg",
        "Guide",
        0,
    ),
    (
        "Dubai Short-Term Rental Regulations",
        "dubai-short-term-rental-regulations",
        "Navigate Dubai's short-term rental laws and regulations.",
        "<h2>Understanding Dubai's Regulatory Framework</h2>"
        "<p>Dubai has specific regulations governing short-term rentals.</p>",
        "/blog-2.jpg",
        "Regulations",
        7,
    ),
    (
        "Maximizing Your Dubai Rental Income",
        "maximizing-rental-income-dubai",
        "Learn proven strategies to optimize your pricing.",
        "<h2>The Importance of Dynamic Pricing</h2><p>Static pricing leaves money on the table.</p>",
        "/blog-3.jpg",
        "Strategy",
        14,
    ),
)

# Served by GET /content/about until an admin saves a page.
DEFAULT_ABOUT = {
    "id": 1,
    "title": "About BNBinsights",
    "subtitle": "The leading directory for Dubai vacation rental managers",
    "mission": (
        "Our mission is to empower property owners with transparent, data-driven insights to make "
        "informed decisions about their vacation rental management. We believe that access to "
        "high-quality information leads to better partnerships and greater success."
    ),
    "story": (
        "BNBinsights was founded in 2024 with a simple vision: create a comprehensive, unbiased "
        "directory of Dubai's vacation rental management companies. What started as a small project "
        "has grown into the region's most trusted resource for property owners seeking professional "
        "management services.\n\n"
        "We've analyzed hundreds of management companies, collected thousands of reviews, and built "
        "a platform that brings transparency to an industry that desperately needed it. Our team of "
        "experts continuously monitors the market to ensure our data remains accurate and up-to-date."
    ),
    "values": (
        "• Transparency: We provide unbiased, data-driven information\n"
        "• Quality: We carefully vet and verify all listed companies\n"
        "• Innovation: We constantly improve our platform and methodology\n"
        "• Community: We build connections between owners and managers\n"
        "• Excellence: We strive for the highest standards in everything we do"
    ),
    "stats": {"managers": 190, "properties": 25000, "cities": 1, "satisfaction": 98},
}
