"""
Streamlit Frontend for FinTrack

One dashboard over the whole finance document, split into a personal and
a business view by the mode switch in the sidebar.

DESIGN PRINCIPLES:
1. Every figure is derived from the current snapshot on each rerun
2. Every change goes through a controller command
3. Form drafts are validated before a command runs
4. Storage problems are logged, never shown

The UI holds no state of its own beyond widget values; the controller
owns the document.
"""

import asyncio
from datetime import date

import pandas as pd
import plotly.express as px
import streamlit as st

from fintrack.calculators import (
    CompoundingFrequency,
    ProjectionScenario,
    contribution_projection,
    effective_pension_rate,
    interest_comparison,
    pension_projection,
    pension_snapshots,
    projection_starting_value,
)
from fintrack.config import get_settings, validate_all_settings
from fintrack.formatting import format_money, format_signed
from fintrack.importers import ColumnMapping, column_options, import_csv, preview_grid
from fintrack.models import (
    Account,
    AccountType,
    CATEGORIES,
    Mode,
    Transaction,
    TransactionType,
    User,
    UserRole,
    category_names,
    subcategories_for,
)
from fintrack.models.finance import CREDIT_TYPES, RATE_BEARING_TYPES
from fintrack.models.reports import TransactionFilter
from fintrack.orchestrator import FinanceController, create_app_components
from fintrack.queries import (
    account_balances,
    apply_filter,
    category_share,
    category_spend,
    credit_utilisation,
    growth_accounts,
    income_sources,
    monthly_trend,
    partition_accounts,
    pot_progress,
    select_by_mode,
)
from fintrack.state import commands
from fintrack.validation import EntryValidator


# Page configuration
st.set_page_config(
    page_title="FinTrack",
    page_icon="💷",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Upper bound of the pension growth rate input, percent
MAX_GROWTH_RATE = 30.0

PAGES = [
    "📊 Dashboard",
    "🏦 Accounts",
    "🧾 Transactions",
    "📈 Analytics",
    "🐷 Savings Pots",
    "🏖️ Pensions",
    "🔮 Projections",
    "🧮 Interest Calculator",
    "👥 Users",
    "📥 Import CSV",
    "⚙️ Settings",
]


def run_async(coro):
    """Helper to run async functions in Streamlit."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@st.cache_resource
def get_controller() -> FinanceController:
    """Get or create the started controller (cached)."""
    controller = create_app_components()
    run_async(controller.start())
    return controller


def dispatch(controller: FinanceController, command, *args, **kwargs):
    """Apply a command and rerun so every view picks up the new snapshot."""
    run_async(controller.apply(command, *args, **kwargs))
    st.rerun()


def flash(message: str):
    """Queue a success message that survives the rerun after a command."""
    st.session_state["flash"] = message


def show_issues(validator: EntryValidator, result) -> bool:
    """Render validation issues; True when the draft may be submitted."""
    summary = validator.get_user_friendly_summary(result)
    if summary:
        (st.warning if result.is_valid else st.error)(summary)
    return result.is_valid


def main():
    """Main application entry point."""
    controller = get_controller()
    app_settings = get_settings().app
    state = controller.state
    currency = state.settings.currency

    message = st.session_state.pop("flash", None)
    if message:
        st.success(message)

    # Sidebar navigation
    st.sidebar.title("💷 FinTrack")
    mode = st.sidebar.radio(
        "Mode",
        options=list(Mode),
        index=list(Mode).index(Mode(app_settings.default_mode)),
        format_func=lambda m: m.value.title(),
        horizontal=True,
    )
    st.sidebar.markdown("---")
    page = st.sidebar.radio("Navigate to:", PAGES, index=0)

    current_user = state.user_by_id(state.current_user)
    if current_user is not None:
        st.sidebar.markdown("---")
        st.sidebar.caption(f"Signed in as **{current_user.name}** ({current_user.role.value})")

    # Route to appropriate page
    if page == "📊 Dashboard":
        render_dashboard_page(controller, mode, currency)
    elif page == "🏦 Accounts":
        render_accounts_page(controller, mode, currency)
    elif page == "🧾 Transactions":
        render_transactions_page(controller, mode, currency)
    elif page == "📈 Analytics":
        render_analytics_page(controller, mode, currency)
    elif page == "🐷 Savings Pots":
        render_pots_page(controller, mode, currency)
    elif page == "🏖️ Pensions":
        render_pensions_page(controller, mode, currency)
    elif page == "🔮 Projections":
        render_projections_page(controller, mode, currency)
    elif page == "🧮 Interest Calculator":
        render_interest_page(currency)
    elif page == "👥 Users":
        render_users_page(controller)
    elif page == "📥 Import CSV":
        render_import_page(controller, mode)
    elif page == "⚙️ Settings":
        render_settings_page(controller)


def render_dashboard_page(controller: FinanceController, mode: Mode, currency: str):
    """Headline figures, spend breakdown and the six-month trend."""
    st.title(f"📊 {mode.value.title()} Dashboard")
    summary = controller.summary(mode)

    k1, k2, k3, k4 = st.columns(4)
    with k1:
        st.metric("Net Worth", format_signed(summary.balances.net_worth, currency))
    with k2:
        st.metric("Total Assets", format_money(summary.balances.total_assets, currency))
    with k3:
        st.metric("Total Debt", format_money(summary.balances.total_debt, currency))
    with k4:
        st.metric("This Month", format_signed(summary.period.monthly_net, currency))

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Spending by Category")
        if summary.category_spend:
            df_cat = pd.DataFrame(
                [{"Category": row.name, "Spent": float(row.value)} for row in summary.category_spend]
            )
            fig = px.pie(df_cat, values="Spent", names="Category", hole=0.5)
            fig.update_layout(height=320, margin=dict(t=10, b=10, l=10, r=10))
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.info("No spending yet.")

    with col2:
        st.subheader("Income vs Spend")
        if summary.trend:
            df_trend = pd.DataFrame([
                {"Month": b.month, "Income": float(b.income), "Spend": float(b.spend)}
                for b in summary.trend
            ])
            fig = px.bar(df_trend, x="Month", y=["Income", "Spend"], barmode="group")
            fig.update_layout(height=320, margin=dict(t=10, b=10, l=10, r=10))
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.info("No transactions yet.")

    st.subheader("Recent Transactions")
    recent = apply_filter(controller.state.transactions, TransactionFilter(mode=mode))[:5]
    if recent:
        st.table(transactions_frame(controller, recent, currency))
    else:
        st.info("No transactions in this mode.")


def transactions_frame(controller: FinanceController, transactions, currency: str) -> pd.DataFrame:
    state = controller.state
    rows = []
    for t in transactions:
        account = state.account_by_id(t.account_id)
        rows.append({
            "Date": t.date,
            "Description": t.description,
            "Category": f"{t.category} / {t.sub_category}" if t.sub_category else t.category,
            "Account": account.name if account else "-",
            "Amount": format_signed(t.amount, currency),
        })
    return pd.DataFrame(rows)


def render_accounts_page(controller: FinanceController, mode: Mode, currency: str):
    """Accounts grouped into savings, debts, pensions and the rest."""
    st.title("🏦 Accounts")
    accounts = select_by_mode(controller.state.accounts, mode)
    sections = partition_accounts(accounts)

    for title, group in [
        ("Current & Business", sections.regular),
        ("Savings", sections.savings),
        ("Pensions", sections.pensions),
        ("Debts", sections.debts),
    ]:
        if not group:
            continue
        st.subheader(title)
        for account in group:
            c1, c2, c3 = st.columns([3, 2, 1])
            with c1:
                st.markdown(f"**{account.name}** · {account.type.label}")
                details = []
                if account.interest_rate is not None:
                    details.append(f"{account.interest_rate}% rate")
                if account.credit_limit is not None:
                    details.append(f"limit {format_money(account.credit_limit, currency)}")
                used = credit_utilisation(account)
                if used is not None:
                    details.append(f"{used:.0f}% used")
                if details:
                    st.caption(", ".join(details))
            with c2:
                st.markdown(format_signed(account.balance, currency))
            with c3:
                if st.button("🗑️", key=f"del-{title}-{account.id}", help="Delete account"):
                    dispatch(controller, commands.delete_account, account.id)
            with st.expander("✏️ Edit"):
                render_account_form(controller, mode, account)

    if accounts:
        df_bal = pd.DataFrame([
            {"Account": row.name, "Balance": float(row.balance)}
            for row in account_balances(accounts)
        ])
        fig = px.bar(df_bal, x="Account", y="Balance", title="Balances")
        st.plotly_chart(fig, use_container_width=True)

    st.markdown("---")
    render_account_form(controller, mode)


def render_account_form(controller: FinanceController, mode: Mode, account: Account = None):
    """Add form, or the edit form for ``account`` prefilled with its fields."""
    if account is None:
        st.subheader("Add Account")
        account_type = st.selectbox(
            "Type",
            options=list(AccountType),
            format_func=lambda t: t.label,
            key="new-account-type",
        )
        form_key = "new-account"
    else:
        account_type = account.type
        form_key = f"edit-account-{account.id}"

    with st.form(form_key, clear_on_submit=account is None):
        name = st.text_input("Name", value=account.name if account else "")
        balance = st.text_input(
            "Balance" if account else "Opening balance",
            value=str(account.balance) if account else "0",
        )
        rate = None
        limit = None
        if account_type in RATE_BEARING_TYPES:
            rate = st.number_input(
                "Interest / growth rate (%)",
                value=account.interest_rate if account else None,
                step=0.1,
                placeholder="Blank uses the default",
            )
        if account_type in CREDIT_TYPES:
            limit = st.number_input(
                "Credit limit",
                value=float(account.credit_limit) if account and account.credit_limit else None,
                min_value=0.0,
                step=100.0,
            )
        color = st.color_picker("Colour", value=account.color if account else "#6366f1")
        submitted = st.form_submit_button(
            "💾 Save" if account else "➕ Add Account", type="primary"
        )

    if submitted:
        validator = EntryValidator(controller.state)
        if show_issues(validator, validator.validate_account(name, balance)):
            built = commands.build_account(
                name=name,
                type=account_type,
                balance=balance,
                mode=mode,
                color=color,
                interest_rate=rate,
                credit_limit=limit,
            )
            if account is None:
                dispatch(controller, commands.add_account, built)
            else:
                dispatch(
                    controller,
                    commands.update_account,
                    account.id,
                    name=built.name,
                    balance=built.balance,
                    color=built.color,
                    interest_rate=built.interest_rate,
                    credit_limit=built.credit_limit,
                )


def render_transactions_page(controller: FinanceController, mode: Mode, currency: str):
    """Filterable transaction list plus the entry form."""
    st.title("🧾 Transactions")
    state = controller.state
    accounts = select_by_mode(state.accounts, mode)
    account_names = {a.id: a.name for a in accounts}

    col1, col2, col3 = st.columns(3)
    with col1:
        account_filter = st.selectbox(
            "Account",
            options=["all"] + list(account_names),
            format_func=lambda x: "All Accounts" if x == "all" else account_names[x],
        )
    with col2:
        category_filter = st.selectbox(
            "Category",
            options=["all"] + category_names(),
            format_func=lambda x: "All Categories" if x == "all" else x,
        )
    with col3:
        search = st.text_input("Search", placeholder="Description contains...")

    criteria = TransactionFilter(
        mode=mode,
        account_id=account_filter,
        category=category_filter,
        search=search,
    )
    transactions = apply_filter(state.transactions, criteria)
    st.caption(f"{len(transactions)} transaction(s)")

    for t in transactions:
        c1, c2, c3, c4 = st.columns([2, 4, 2, 1])
        c1.markdown(t.date or "-")
        c2.markdown(f"**{t.description}**  \n{t.category} · {t.sub_category}")
        c3.markdown(format_signed(t.amount, currency))
        if c4.button("🗑️", key=f"del-tx-{t.id}", help="Delete transaction"):
            dispatch(controller, commands.delete_transaction, t.id)
        with st.expander("✏️ Edit"):
            render_transaction_form(controller, mode, account_names, t)

    st.markdown("---")
    render_transaction_form(controller, mode, account_names)


def _option_index(options: list, value) -> int:
    return options.index(value) if value in options else 0


def _form_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        return date.today()


def render_transaction_form(
    controller: FinanceController,
    mode: Mode,
    account_names: dict,
    transaction: Transaction = None,
):
    """Add form, or the edit form for ``transaction`` prefilled with its fields."""
    if transaction is None:
        st.subheader("Add Transaction")
    if not account_names:
        st.info("Add an account in this mode first.")
        return

    t = transaction
    key = f"edit-tx-{t.id}" if t else "new-tx"
    categories = category_names()
    category = st.selectbox(
        "Category",
        options=categories,
        index=_option_index(categories, t.category) if t else 0,
        key=f"{key}-category",
    )
    with st.form(key, clear_on_submit=t is None):
        description = st.text_input("Description", value=t.description if t else "")
        amount = st.text_input(
            "Amount",
            value=str(abs(t.amount)) if t else "",
            help="Enter the amount without a sign",
        )
        types = list(TransactionType)
        tx_type = st.selectbox(
            "Type",
            options=types,
            index=_option_index(types, t.type) if t else 0,
            format_func=lambda x: x.value.title(),
        )
        subs = subcategories_for(category)
        sub_category = st.selectbox(
            "Sub-category",
            options=subs,
            index=_option_index(subs, t.sub_category) if t else 0,
        )
        account_ids = list(account_names)
        account_id = st.selectbox(
            "Account",
            options=account_ids,
            index=_option_index(account_ids, t.account_id) if t else 0,
            format_func=lambda x: account_names[x],
        )
        tx_date = st.date_input("Date", value=_form_date(t.date) if t else date.today())
        submitted = st.form_submit_button(
            "💾 Save" if t else "➕ Add Transaction", type="primary"
        )

    if submitted:
        validator = EntryValidator(controller.state)
        result = validator.validate_transaction(
            description, amount, account_id, category, sub_category
        )
        if show_issues(validator, result):
            transaction = commands.build_transaction(
                description=description,
                amount=amount,
                account_id=account_id,
                mode=mode,
                type=tx_type,
                date_str=tx_date.isoformat(),
                category=category,
                sub_category=sub_category,
                transaction_id=t.id if t else None,
            )
            if t is None:
                dispatch(controller, commands.add_transaction, transaction)
            else:
                dispatch(controller, commands.replace_transaction, transaction)


def render_analytics_page(controller: FinanceController, mode: Mode, currency: str):
    """Category breakdown table and income sources."""
    st.title("📈 Analytics")
    transactions = select_by_mode(controller.state.transactions, mode)

    st.subheader("Spending Breakdown")
    shares = category_share(category_spend(transactions))
    if shares:
        st.dataframe(
            pd.DataFrame([
                {
                    "Category": s.name,
                    "Spent": format_money(s.value, currency),
                    "Share": f"{s.percent:.1f}%",
                }
                for s in shares
            ]),
            use_container_width=True,
            hide_index=True,
        )
    else:
        st.info("No spending yet.")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Income Sources")
        sources = income_sources(transactions)
        if sources:
            df_inc = pd.DataFrame([{"Source": s.name, "Amount": float(s.value)} for s in sources])
            st.plotly_chart(px.pie(df_inc, values="Amount", names="Source"), use_container_width=True)
        else:
            st.info("No income yet.")
    with col2:
        st.subheader("Monthly Net")
        trend = monthly_trend(controller.state.transactions, mode)
        if trend:
            df_net = pd.DataFrame([{"Month": b.month, "Net": float(b.net)} for b in trend])
            st.plotly_chart(px.line(df_net, x="Month", y="Net", markers=True), use_container_width=True)


def render_pots_page(controller: FinanceController, mode: Mode, currency: str):
    """Savings goals with progress bars."""
    st.title("🐷 Savings Pots")
    state = controller.state

    for pot in state.pots:
        st.markdown(
            f"**{pot.name}** · {format_money(pot.current, currency)} "
            f"of {format_money(pot.target, currency)}"
        )
        st.progress(pot_progress(pot) / 100)
        c1, c2, c3 = st.columns([2, 1, 1])
        amount = c1.number_input(
            "Amount", min_value=0.0, step=10.0, key=f"pot-amt-{pot.id}", label_visibility="collapsed"
        )
        if c2.button("➕ Add", key=f"pot-add-{pot.id}"):
            dispatch(controller, commands.add_to_pot, pot.id, amount)
        if c3.button("🗑️ Delete", key=f"pot-del-{pot.id}"):
            dispatch(controller, commands.delete_pot, pot.id)

    st.markdown("---")
    st.subheader("New Pot")
    savings = [a for a in select_by_mode(state.accounts, mode) if a.type == AccountType.SAVINGS]
    with st.form("new-pot", clear_on_submit=True):
        name = st.text_input("Name")
        target = st.text_input("Target")
        current = st.text_input("Already saved", value="0")
        account_id = st.selectbox(
            "Linked account",
            options=[""] + [a.id for a in savings],
            format_func=lambda x: "None" if not x else state.account_by_id(x).name,
        )
        color = st.color_picker("Colour", value="#6366f1")
        submitted = st.form_submit_button("➕ Create Pot", type="primary")

    if submitted:
        validator = EntryValidator(state)
        if show_issues(validator, validator.validate_pot(name, target, current)):
            pot = commands.build_pot(name, target, current, color=color, account_id=account_id)
            dispatch(controller, commands.add_pot, pot)


def render_pensions_page(controller: FinanceController, mode: Mode, currency: str):
    """Growth scenarios for pension and investment accounts."""
    st.title("🏖️ Pensions & Investments")
    accounts = growth_accounts(select_by_mode(controller.state.accounts, mode))
    if not accounts:
        st.info("No pension or investment accounts in this mode.")
        return

    horizon = st.slider(
        "Horizon (years)", min_value=5, max_value=40, value=get_settings().app.default_pension_horizon
    )

    for account in accounts:
        st.subheader(f"{account.name} · {format_money(account.balance, currency)}")
        current_rate = min(MAX_GROWTH_RATE, max(0.0, effective_pension_rate(account.interest_rate)))
        rate = st.number_input(
            "Growth rate (%)",
            min_value=0.0,
            max_value=MAX_GROWTH_RATE,
            value=current_rate,
            step=0.5,
            key=f"rate-{account.id}",
        )
        if rate != current_rate:
            dispatch(controller, commands.set_interest_rate, account.id, rate)

        cols = st.columns(4)
        for col, (years, value) in zip(cols, pension_snapshots(account.balance, account.interest_rate).items()):
            col.metric(f"{years} years", format_money(value, currency))

        points = pension_projection(account.balance, account.interest_rate, horizon)
        df = pd.DataFrame([p.model_dump() for p in points]).set_index("year")
        st.line_chart(df[["conservative", "expected", "optimistic"]])


def render_projections_page(controller: FinanceController, mode: Mode, currency: str):
    """Savings or net worth under a monthly contribution."""
    st.title("🔮 Projections")
    app_settings = get_settings().app

    scenario = st.radio(
        "Start from",
        options=list(ProjectionScenario),
        format_func=lambda s: "Savings" if s is ProjectionScenario.SAVINGS else "Net Worth",
        horizontal=True,
    )
    col1, col2, col3 = st.columns(3)
    months = col1.slider("Months", 6, 360, app_settings.default_projection_months)
    contribution = col2.number_input(
        "Monthly contribution", min_value=0.0, value=app_settings.default_monthly_contribution, step=50.0
    )
    growth = col3.slider("Annual growth (%)", 0.0, 20.0, app_settings.default_growth_rate, step=0.5)

    start = projection_starting_value(scenario, select_by_mode(controller.state.accounts, mode))
    points = contribution_projection(start, months, contribution, growth)

    st.metric("Starting value", format_signed(start, currency))
    st.metric(f"After {points[-1].month} months", format_signed(points[-1].value, currency))
    df = pd.DataFrame([{"Month": p.month, "Value": p.value} for p in points])
    st.plotly_chart(px.area(df, x="Month", y="Value"), use_container_width=True)


def render_interest_page(currency: str):
    """Simple vs compound interest side by side."""
    st.title("🧮 Interest Calculator")
    col1, col2, col3, col4 = st.columns(4)
    principal = col1.number_input("Principal", min_value=0.0, value=10000.0, step=100.0)
    rate = col2.number_input("Rate (%)", min_value=0.0, value=5.0, step=0.1)
    years = col3.number_input("Years", min_value=0.0, value=10.0, step=1.0)
    frequency = col4.selectbox(
        "Compounding",
        options=list(CompoundingFrequency),
        format_func=lambda f: f.name.title(),
    )

    result = interest_comparison(principal, rate, years, frequency)
    c1, c2, c3 = st.columns(3)
    c1.metric("Simple", format_money(result.simple_total, currency), format_money(result.simple_interest, currency))
    c2.metric("Compound", format_money(result.compound_total, currency), format_money(result.compound_interest, currency))
    c3.metric("Compound advantage", format_money(result.compound_advantage, currency))


def render_users_page(controller: FinanceController):
    """Household members and their roles."""
    st.title("👥 Users")
    state = controller.state

    for user in state.users:
        c1, c2, c3 = st.columns([3, 2, 1])
        c1.markdown(f"**{user.name}**  \n{user.email or '-'}")
        c2.markdown(user.role.value.title())
        if user.id != state.current_user and c3.button("🗑️", key=f"del-user-{user.id}"):
            dispatch(controller, commands.delete_user, user.id)

    st.markdown("---")
    with st.form("rename-user"):
        current = state.user_by_id(state.current_user)
        new_name = st.text_input("Your name", value=current.name if current else "")
        if st.form_submit_button("💾 Save name") and new_name.strip():
            dispatch(controller, commands.rename_current_user, new_name)

    st.subheader("Invite User")
    with st.form("new-user", clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        role = st.selectbox("Role", options=list(UserRole), format_func=lambda r: r.value.title())
        submitted = st.form_submit_button("➕ Add User", type="primary")

    if submitted:
        validator = EntryValidator(state)
        if show_issues(validator, validator.validate_user(name, email)):
            dispatch(controller, commands.add_user, User(name=name, email=email, role=role))


def render_import_page(controller: FinanceController, mode: Mode):
    """CSV upload, column mapping and import."""
    st.title("📥 Import CSV")
    state = controller.state
    accounts = select_by_mode(state.accounts, mode)
    if not accounts:
        st.info("Add an account in this mode first.")
        return

    uploaded = st.file_uploader("Bank export", type=["csv"])
    if not uploaded:
        return

    text = uploaded.getvalue().decode("utf-8", errors="replace")
    grid = preview_grid(text, rows=get_settings().app.csv_preview_rows)
    if not grid:
        st.warning("The file is empty.")
        return

    st.dataframe(pd.DataFrame(grid[1:], columns=None), use_container_width=True)

    options = column_options(grid[0])
    labels = dict(options)
    indices = [i for i, _ in options]

    def pick(label: str, default: int) -> int:
        return st.selectbox(
            label,
            options=indices,
            index=min(default, len(indices) - 1),
            format_func=lambda i: labels[i],
        )

    col1, col2, col3 = st.columns(3)
    with col1:
        date_col = pick("Date column", 0)
    with col2:
        desc_col = pick("Description column", 1)
    with col3:
        amount_col = pick("Amount column", 2)

    account_id = st.selectbox(
        "Import into",
        options=[a.id for a in accounts],
        format_func=lambda x: state.account_by_id(x).name,
    )

    if st.button("📥 Import", type="primary"):
        mapping = ColumnMapping(date=date_col, description=desc_col, amount=amount_col)
        imported = import_csv(text, mapping, account_id, mode)
        if imported:
            flash(f"Imported {len(imported)} transaction(s)")
            dispatch(controller, commands.append_transactions, imported)
        else:
            st.warning("No usable rows found.")


def render_settings_page(controller: FinanceController):
    """Preferences, backup and reset."""
    st.title("⚙️ Settings")
    state = controller.state

    st.markdown("### Preferences")
    with st.form("preferences"):
        currency = st.text_input("Currency symbol", value=state.settings.currency, max_chars=3)
        dark_mode = st.toggle("Dark mode", value=state.settings.dark_mode)
        if st.form_submit_button("💾 Save"):
            dispatch(controller, commands.update_preferences, currency=currency, dark_mode=dark_mode)

    st.markdown("### Backup")
    st.download_button(
        "⬇ Export JSON",
        controller.export_json(),
        file_name=controller.backup_filename,
        mime="application/json",
    )

    st.markdown("### Reset")
    confirm = st.checkbox(
        "I understand this replaces all my data with the sample data", key="confirm-reset"
    )
    if st.button("♻️ Reset to sample data", disabled=not confirm, key="reset-data"):
        run_async(controller.reset())
        flash("Data reset to the sample data")
        st.rerun()

    st.markdown("---")
    st.markdown("### Configuration Status")
    st.caption(f"Environment: {get_settings().app.app_environment}")
    status = validate_all_settings()
    for name in ("storage", "app"):
        if status.get(name, False):
            st.success(f"✅ {name.title()} settings loaded")
        else:
            st.error(f"❌ {name.title()} settings - {status.get(f'{name}_error', 'invalid')}")

    with st.expander("Categories"):
        for category, subs in CATEGORIES.items():
            st.markdown(f"**{category}**: {', '.join(subs)}")


if __name__ == "__main__":
    main()
