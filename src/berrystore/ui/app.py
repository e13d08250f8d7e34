"""
Streamlit UI for the berry storefront.
- Insights: search / category filter / pagination over articles
- Shop: product variants with a quantity selector
- Cart drawer in the sidebar
- Settings: health checks
"""

import uuid

import streamlit as st

from berrystore import config
from berrystore.core.cart_store import CartStore, QuantityDirection
from berrystore.core.catalog import ArticleCatalog
from berrystore.core.content import PRODUCTS
from berrystore.utils.health import health_check

# -------------------------------------------------
# Page config
# -------------------------------------------------
st.set_page_config(
    page_title="Moberry Blueberry",
    page_icon="🫐",
    layout="wide",
)

# -------------------------------------------------
# Session state
# -------------------------------------------------
if "session_id" not in st.session_state:
    st.session_state.session_id = str(uuid.uuid4())

# One cart per session, handed to every section below
if "cart_store" not in st.session_state:
    st.session_state.cart_store = CartStore(notifier=st.toast)

if "catalog" not in st.session_state:
    st.session_state.catalog = ArticleCatalog()

store: CartStore = st.session_state.cart_store
catalog: ArticleCatalog = st.session_state.catalog

if store.scroll_locked:
    st.markdown("<style>body { overflow-y: hidden; }</style>", unsafe_allow_html=True)


def render_cart(store: CartStore):
    st.sidebar.subheader(f"🛒 Your Cart ({store.total_quantities} items)")

    if not store.cart_items:
        st.sidebar.info("Your shopping bag is empty.")
        return

    for item in store.cart_items:
        with st.sidebar.container(border=True):
            st.markdown(f"**{item.name}** ({item.weight})")
            st.caption(f"₹{item.price:.2f} each")
            dec, qty, inc, remove = st.columns([1, 1, 1, 2])
            dec.button("−", key=f"dec-{item.id}", on_click=store.toggle_item_quantity,
                       args=(item.id, QuantityDirection.DEC))
            qty.markdown(f"**{item.quantity}**")
            inc.button("+", key=f"inc-{item.id}", on_click=store.toggle_item_quantity,
                       args=(item.id, QuantityDirection.INC))
            remove.button("Remove", key=f"rm-{item.id}", on_click=store.remove, args=(item.id,))

    st.sidebar.markdown(f"### Subtotal: ₹{store.total_price:.2f}")
    st.sidebar.button("Clear cart", on_click=store.clear)


def render_article_card(article):
    with st.container(border=True):
        st.caption(f"{article.category} • {article.date} • {article.read_time}")
        st.markdown(f"#### [{article.title}]({article.href})")
        st.write(article.excerpt)
        tags = " ".join(f"`{t}`" for t in article.tags[:3])
        if len(article.tags) > 3:
            tags += f" +{len(article.tags) - 3} more"
        st.markdown(tags)


def render_insights(catalog: ArticleCatalog):
    if catalog.loading:
        with st.spinner("Loading insights..."):
            catalog.load()

    st.subheader("Blueberry insights")

    query = st.text_input(
        "Search articles by title, content, or tags...",
        key="insights_search",
    )
    if query != catalog.search_query:
        catalog.search(query)

    counts = catalog.category_counts()
    columns = st.columns(min(len(catalog.categories), 6))
    for i, category in enumerate(catalog.categories):
        columns[i % len(columns)].button(
            f"{category} ({counts[category]})",
            key=f"cat-{category}",
            type="primary" if category == catalog.selected_category else "secondary",
            on_click=catalog.select_category,
            args=(category,),
        )

    left, right = st.columns([3, 2])
    left.write(catalog.results_summary())
    right.caption(catalog.source_summary())

    if not catalog.filtered_articles:
        st.info("No articles found matching your criteria. Try adjusting your search or filters.")
    else:
        grid = st.columns(3)
        for i, article in enumerate(catalog.page_articles):
            with grid[i % 3]:
                render_article_card(article)

    if catalog.total_pages > 1:
        buttons = catalog.page_buttons()
        pager = st.columns(len(buttons) + 2)
        pager[0].button("‹ Previous", disabled=not catalog.has_previous, on_click=catalog.previous_page)
        for col, page in zip(pager[1:-1], buttons):
            col.button(
                str(page),
                key=f"page-{page}",
                type="primary" if page == catalog.current_page else "secondary",
                on_click=catalog.set_page,
                args=(page,),
            )
        pager[-1].button("Next ›", disabled=not catalog.has_next, on_click=catalog.next_page)

    st.markdown("---")
    st.markdown("### Stay Updated with Blueberry Farming Insights")
    st.link_button("Say Hi to Us on WhatsApp", config.WHATSAPP_URL)


def render_shop(store: CartStore):
    st.subheader("Shop fresh blueberries")

    q_dec, q_val, q_inc = st.columns([1, 1, 1])
    q_dec.button("−", key="qty-dec", on_click=store.dec_qty)
    q_val.markdown(f"**Quantity: {store.qty}**")
    q_inc.button("+", key="qty-inc", on_click=store.inc_qty)

    grid = st.columns(len(PRODUCTS))
    for col, product in zip(grid, PRODUCTS):
        with col:
            with st.container(border=True):
                st.markdown(f"**{product.name}**")
                st.caption(product.weight)
                st.write(f"₹{product.price:.2f}")
                st.button(
                    "Add to cart",
                    key=f"add-{product.cart_key}",
                    on_click=store.add,
                    args=(product, store.qty),
                )


# -------------------------------------------------
# Header + cart drawer
# -------------------------------------------------
st.markdown(
    "<h1 style='color:#3b4cca'>🫐 Moberry Blueberry</h1>",
    unsafe_allow_html=True
)

st.sidebar.button(
    "Hide cart" if store.show_cart else f"🛒 Cart ({store.total_quantities})",
    on_click=store.set_show_cart,
    args=(not store.show_cart,),
)
if store.show_cart:
    render_cart(store)

st.sidebar.toggle(
    "Menu",
    key="menu_open",
    value=store.active,
    on_change=lambda: store.set_active(st.session_state.menu_open),
)
if store.active:
    st.sidebar.markdown("- [Insights](/insights)\n- [Shop](/shop)\n- [Investment](/investment)")

tab_insights, tab_shop, tab_settings = st.tabs(
    ["📰 Insights", "🛍️ Shop", "⚙️ Settings"]
)

with tab_insights:
    render_insights(catalog)

with tab_shop:
    render_shop(store)

with tab_settings:
    st.subheader("System Health")
    for name, ok in health_check().items():
        if ok:
            st.success(f"{name} OK")
        else:
            st.error(f"{name} unreachable")

    if st.button("🔄 Reset Session"):
        st.session_state.session_id = str(uuid.uuid4())
        st.session_state.cart_store = CartStore(notifier=st.toast)
        st.session_state.catalog = ArticleCatalog()
        st.success("Session reset")
        st.rerun()
