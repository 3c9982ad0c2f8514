import pandas as pd
import streamlit as st

# Configuration
from orders_admin.config import get_config

# Ranked order sources (API first, Firestore fallback) + view state
from orders_admin.aggregation import (
    order_details,
    order_items_frame,
    orders_to_frame,
    recent_orders,
    top_products,
)
from orders_admin.data.models import STATUS_TABS
from orders_admin.data.util import get_order_sources
from orders_admin.view import OrdersView

st.set_page_config(page_title="Order Management", layout="wide")

config = get_config()


def notify(title: str, description: str) -> None:
    st.toast(f"**{title}**: {description}")
    st.session_state["load_error"] = description


# -----------------------------------------------------------------------------
# One fetch sequence per session; "Refresh" starts a new one.
# -----------------------------------------------------------------------------
if "orders_view" not in st.session_state:
    st.session_state["orders_view"] = OrdersView(get_order_sources(), notify)
    st.session_state["needs_load"] = True

view: OrdersView = st.session_state["orders_view"]

if st.sidebar.button("Refresh orders"):
    st.session_state["needs_load"] = True

if st.session_state.get("needs_load"):
    st.session_state.pop("load_error", None)
    with st.spinner("Loading orders..."):
        view.load()
    st.session_state["needs_load"] = False

st.title("Order Management")
st.caption("View and manage customer orders")

if st.session_state.get("load_error"):
    st.error(st.session_state["load_error"])

# -----------------------------------------------------------------------------
# KPIs
# -----------------------------------------------------------------------------
summary = view.summary
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Orders", f"{summary.counts.all:,}", help="All time orders")
c2.metric("Total Revenue", f"${summary.total_revenue:,.2f}", help="From paid orders")
c3.metric("Need Attention", f"{summary.needing_attention:,}", help="Orders in pending or processing")
c4.metric("Completed Orders", f"{summary.completed:,}", help="Successfully delivered")

# -----------------------------------------------------------------------------
# Orders table for the selected status tab
# -----------------------------------------------------------------------------
counts = summary.counts.model_dump()


def tab_label(name: str) -> str:
    if name == "all":
        return f"All Orders ({counts['all']})"
    return f"{name.title()} ({counts[name]})"


selected_tab = st.radio(
    "Status",
    list(STATUS_TABS),
    index=list(STATUS_TABS).index(view.active_tab),
    format_func=tab_label,
    horizontal=True,
    label_visibility="collapsed",
)
view.select_tab(selected_tab)
filtered = view.filtered_orders

st.caption("Showing all orders" if view.active_tab == "all" else f"Showing orders with status: {view.active_tab}")
if filtered:
    st.dataframe(orders_to_frame(filtered), use_container_width=True, hide_index=True)
else:
    st.info("No orders found for this status")

# -----------------------------------------------------------------------------
# Order details
# -----------------------------------------------------------------------------
if filtered:
    by_id = {o.id: o for o in filtered}
    selected_id = st.selectbox("Order details", list(by_id), format_func=lambda oid: f"Order #{oid[:8]}")
    order = by_id[selected_id]
    details = order_details(order)
    with st.expander(f"Order #{order.id}", expanded=True):
        info, customer = st.columns(2)
        info.markdown("**Order information**")
        info.write(
            {
                "Status": details["status"],
                "Payment status": details["payment_status"],
                "Payment method": details["payment_method"] or "N/A",
                "Order date": details["order_date"].strftime("%b %d, %Y %I:%M %p"),
                "Tracking number": details["tracking_number"] or "N/A",
            }
        )
        customer.markdown("**Customer**")
        customer.write(
            {
                "Name": details["customer"] or "N/A",
                "Phone": details["phone"] or "N/A",
                "Shipping address": details["shipping_address"] or "N/A",
            }
        )
        st.markdown("**Items**")
        st.dataframe(order_items_frame(order), use_container_width=True, hide_index=True)
        st.markdown(f"**Total:** ${order.total_amount:,.2f}")
        if details["notes"]:
            st.markdown(f"**Notes:** {details['notes']}")

# -----------------------------------------------------------------------------
# Recent orders and best sellers
# -----------------------------------------------------------------------------
left, right = st.columns(2)
with left:
    st.markdown("### Recent orders")
    st.dataframe(
        orders_to_frame(recent_orders(view.orders, config.recent_orders_limit)),
        use_container_width=True,
        hide_index=True,
    )
with right:
    st.markdown("### Top products (units sold)")
    best_sellers = top_products(view.orders, config.top_products_limit)
    if best_sellers:
        top_df = pd.DataFrame(
            [{"product": p.name or str(p.product_id), "units": p.units} for p in best_sellers]
        )
        st.bar_chart(top_df, x="product", y="units", use_container_width=True)
    else:
        st.info("No product sales yet")

with st.expander("Data source"):
    st.write(
        f"Orders loaded from **{view.source_name or 'no source'}**. Sources are tried in order "
        f"({', '.join(config.order_sources)}); the first one that answers is used."
    )
