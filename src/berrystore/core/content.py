"""
Compiled-in storefront content: editorial articles, stock images and the
product list sold on the shop page.
"""

from typing import List

from berrystore.models.article import Article
from berrystore.models.product import Product

STOCK_IMAGES = [
    "/images/Blueberry Lifecycle.jpg",
    "/images/Blueberry Plant in a Polyhouse.jpg",
    "/images/Blueberry Rows in Polytunnel in Fruiting Phase.jpg",
    "/images/The Life Cycle of a Blueberry.jpeg",
]

LOCATION_CATEGORY = "Location Investment"


def _article(**fields) -> Article:
    fields.setdefault("date", "December 2024")
    fields.setdefault("source", "static")
    return Article(**fields)


# Authored order is the display order
STATIC_ARTICLES: List[Article] = [
    _article(
        id="1",
        slug="global-blueberry-price-trends",
        title="Global Blueberry Wholesale Price Trends 2025-2035",
        excerpt="Market analysis reveals 6-7.2% CAGR growth driven by increasing global demand and health consciousness. Discover the factors shaping blueberry prices over the next decade.",
        read_time="8 min read",
        category="Market Analysis",
        image=STOCK_IMAGES[0],
        tags=["Price Trends", "Market Analysis", "Investment"],
    ),
    _article(
        id="6",
        slug="google-trends-blueberry-demand-india",
        title="Google Trends Reveal 9% Growth in Blueberry Interest: India's Rising Opportunity",
        excerpt="Google search data shows 8.5M monthly searches for blueberries with 9% year-over-year growth, highlighting massive untapped potential in the Indian market as global demand soars.",
        read_time="6 min read",
        category="Market Research",
        image=STOCK_IMAGES[1],
        tags=["Google Trends", "Market Demand", "India Opportunity"],
    ),
    _article(
        id="2",
        slug="blueberry-farming-india",
        title="Why Blueberry Farming is the Future of Agriculture in India",
        excerpt="Explore how blueberry cultivation is transforming Indian agriculture with high returns, sustainable practices, and growing domestic demand.",
        read_time="6 min read",
        category="Farming Guide",
        image=STOCK_IMAGES[2],
        tags=["India", "Farming", "Sustainability"],
    ),
    _article(
        id="3",
        slug="health-benefits-blueberries",
        title="The Science Behind Blueberries: Health Benefits That Drive Demand",
        excerpt="From antioxidants to brain health, discover why health-conscious consumers are driving unprecedented demand for blueberries worldwide.",
        read_time="5 min read",
        category="Health & Nutrition",
        image="/images/Blueberry Pudding.jpg",
        tags=["Health", "Nutrition", "Consumer Trends"],
    ),
    _article(
        id="4",
        slug="blueberry-varieties-india",
        title="Best Blueberry Varieties for Indian Climate: A Comprehensive Guide",
        excerpt="Learn about the most suitable blueberry cultivars for different Indian regions, their yield potential, and climate requirements.",
        read_time="7 min read",
        category="Technical Guide",
        image=STOCK_IMAGES[3],
        tags=["Varieties", "Climate", "Technical"],
    ),
    _article(
        id="5",
        slug="roi-analysis-blueberry-farming",
        title="ROI Analysis: Blueberry Farming vs Traditional Crops",
        excerpt="A detailed financial comparison showing why blueberry farming offers 5X returns compared to traditional Indian crops.",
        read_time="10 min read",
        category="Financial Analysis",
        image="/images/hero-desktop.jpg",
        tags=["ROI", "Financial", "Comparison"],
    ),
    _article(
        id="12",
        slug="blueberry-export-opportunities-india",
        title="India's Blueberry Export Potential: Tapping Global Markets",
        excerpt="Explore the untapped potential of blueberry exports from India to international markets. Learn about global demand, quality standards, and profit margins.",
        read_time="8 min read",
        category="Export Strategy",
        image=STOCK_IMAGES[0],
        tags=["Export", "Global Markets", "International Trade"],
    ),
    _article(
        id="13",
        slug="climate-controlled-farming-benefits",
        title="Climate-Controlled Blueberry Farming: 5X Higher Yields",
        excerpt="Discover how polyhouse cultivation and climate control systems boost blueberry yields by 500% compared to open-field farming.",
        read_time="6 min read",
        category="Technology",
        image=STOCK_IMAGES[1],
        tags=["Climate Control", "Polyhouse", "Technology"],
    ),
    _article(
        id="14",
        slug="government-subsidies-blueberry-farming",
        title="Government Subsidies for Blueberry Farming: Save Up to 50%",
        excerpt="Complete guide to agricultural subsidies, grants, and support schemes available for blueberry farming in India. Reduce your investment by up to 50%.",
        read_time="9 min read",
        category="Government Schemes",
        image=STOCK_IMAGES[2],
        tags=["Subsidies", "Government", "Financial Support"],
    ),
    _article(
        id="15",
        slug="organic-blueberry-certification-india",
        title="Organic Blueberry Certification: Premium Pricing Strategy",
        excerpt="Learn how organic certification can increase your blueberry prices by 40-60%. Step-by-step guide to organic farming and certification process.",
        read_time="7 min read",
        category="Organic Farming",
        image=STOCK_IMAGES[3],
        tags=["Organic", "Certification", "Premium Pricing"],
    ),
    _article(
        id="7",
        slug="../tea-estate-partnership",
        title="Tea Estate Partnership: Convert Your Tea Garden to Blueberry Farm",
        excerpt="Transform your tea estate into a high-yield blueberry farm with 6x higher profits. Explore sub-lease, joint venture, or land sale options with 20-35% ROI.",
        read_time="12 min read",
        category="Partnership Opportunities",
        image=STOCK_IMAGES[1],
        tags=["Tea Estate", "Partnership", "Land Conversion"],
    ),
    _article(
        id="8",
        slug="../investment/west-bengal/siliguri",
        title="Blueberry Farming Investment in Siliguri: Complete Guide",
        excerpt="Discover why Siliguri offers ideal conditions for blueberry farming with excellent climate, soil pH, and government support. Calculate your ROI for this emerging opportunity.",
        read_time="10 min read",
        category=LOCATION_CATEGORY,
        image=STOCK_IMAGES[3],
        tags=["Siliguri", "West Bengal", "Investment Calculator"],
    ),
    _article(
        id="9",
        slug="../investment/assam/guwahati",
        title="Guwahati Blueberry Farm Investment: Northeast India Opportunity",
        excerpt="Explore blueberry farming investment opportunities in Guwahati with detailed climate analysis, soil conditions, and projected returns in Assam's agricultural hub.",
        read_time="10 min read",
        category=LOCATION_CATEGORY,
        image=STOCK_IMAGES[2],
        tags=["Guwahati", "Assam", "Northeast India"],
    ),
    _article(
        id="10",
        slug="../investment/meghalaya/shillong",
        title="Shillong Blueberry Cultivation: Hill Station Farming Advantage",
        excerpt="Leverage Shillong's unique hill climate and acidic soil for premium blueberry cultivation. Learn about Meghalaya's agricultural policies and investment incentives.",
        read_time="9 min read",
        category=LOCATION_CATEGORY,
        image=STOCK_IMAGES[1],
        tags=["Shillong", "Meghalaya", "Hill Station Farming"],
    ),
    _article(
        id="11",
        slug="../investment/sikkim/gangtok",
        title="Gangtok Blueberry Farming: High-Altitude Organic Advantage",
        excerpt="Discover why Gangtok's high-altitude climate and organic farming tradition make it perfect for premium blueberry cultivation with excellent export potential.",
        read_time="9 min read",
        category=LOCATION_CATEGORY,
        image=STOCK_IMAGES[0],
        tags=["Gangtok", "Sikkim", "High Altitude"],
    ),
]

# Fresh berries sold in three pack sizes
PRODUCTS: List[Product] = [
    Product(id="fresh-blueberries", name="Fresh Blueberries", price=199.0, weight="125g",
            image="/images/Blueberry Lifecycle.jpg"),
    Product(id="fresh-blueberries", name="Fresh Blueberries", price=349.0, weight="250g",
            image="/images/Blueberry Lifecycle.jpg"),
    Product(id="fresh-blueberries", name="Fresh Blueberries", price=649.0, weight="500g",
            image="/images/Blueberry Lifecycle.jpg"),
    Product(id="blueberry-jam", name="Blueberry Jam", price=299.0, weight="200g",
            image="/images/Blueberry Pudding.jpg"),
]
