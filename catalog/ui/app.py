# catalog/ui/app.py

"""Terminal UI: storefront with category filter plus gated admin screens."""

import logging
import webbrowser
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import ModalScreen, Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Select,
    Static,
)

from catalog.config.settings import Settings
from catalog.errors import CatalogError, InvalidProduct
from catalog.filters.product_validator import ProductValidator
from catalog.models.product import Product, new_product_id
from catalog.services.admin_auth import AdminGate
from catalog.services.catalog_service import CatalogService

logger = logging.getLogger("catalog.ui")

_FORM_FIELDS: list[tuple[str, str, str]] = [
    ("title", "Title", "Handcrafted Ceramic Mug"),
    ("description", "Description", "At least 10 characters"),
    ("image_url", "Image URL", "https://example.com/image.jpg"),
    ("external_url", "Marketplace URL", "https://etsy.com/listing/..."),
    ("category", "Category", "Home"),
    ("price", "Price", "0.00"),
]


class ConfirmScreen(ModalScreen[bool]):
    """Yes/No dialog."""

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self.message, id="confirm_message"),
            Horizontal(
                Button("Confirm", variant="error", id="confirm_yes"),
                Button("Cancel", id="confirm_no"),
                classes="buttons",
            ),
            classes="dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm_yes")


class LoginScreen(ModalScreen[bool]):
    """Password prompt guarding the admin screens."""

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, gate: AdminGate) -> None:
        super().__init__()
        self.gate = gate

    def compose(self) -> ComposeResult:
        yield Container(
            Static("🔒 Admin Access", classes="dialog_title"),
            Static(
                "Enter password to access the admin panel",
                classes="hint",
            ),
            Static("", id="login_error"),
            Input(
                placeholder="Enter admin password",
                password=True,
                id="password_input",
            ),
            Horizontal(
                Button(
                    "Access Admin Panel",
                    variant="primary",
                    id="login_btn",
                ),
                Button("Cancel", id="login_cancel"),
                classes="buttons",
            ),
            classes="dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "login_btn":
            self._attempt_login()
        else:
            self.dismiss(False)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._attempt_login()

    def action_cancel(self) -> None:
        self.dismiss(False)

    def _attempt_login(self) -> None:
        password = self.query_one("#password_input", Input)
        if self.gate.login(password.value):
            self.dismiss(True)
            return
        password.value = ""
        self.query_one("#login_error", Static).update(
            "Incorrect password. Please try again."
        )


class ProductFormScreen(Screen[Product | None]):
    """Add or edit one product; dismisses with the validated Product."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(self, product: Product | None = None) -> None:
        super().__init__()
        self.product = product
        self.problems: dict[str, str] = {}

    def compose(self) -> ComposeResult:
        heading = "Edit Product" if self.product else "Add New Product"
        initial: dict[str, str] = {}
        if self.product is not None:
            initial = {
                "title": self.product.title,
                "description": self.product.description,
                "image_url": self.product.image_url,
                "external_url": self.product.external_url,
                "category": self.product.category,
                "price": f"{self.product.price:.2f}",
            }

        fields: list[Label | Input | Static] = []
        for name, label, placeholder in _FORM_FIELDS:
            fields.append(Label(label))
            fields.append(
                Input(
                    value=initial.get(name, "0" if name == "price" else ""),
                    placeholder=placeholder,
                    id=f"{name}_input",
                )
            )
            fields.append(Static("", id=f"{name}_error", classes="error"))

        yield Header()
        yield VerticalScroll(
            Static(heading, classes="dialog_title"),
            *fields,
            Horizontal(
                Button("Save", variant="primary", id="save_btn"),
                Button("Cancel", id="form_cancel"),
                classes="buttons",
            ),
            id="product_form",
        )
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save_btn":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def action_save(self) -> None:
        self._submit()

    def _value(self, name: str) -> str:
        return self.query_one(f"#{name}_input", Input).value

    def _submit(self) -> None:
        product_id = self.product.id if self.product else new_product_id()
        self.problems = {}
        for name, _label, _placeholder in _FORM_FIELDS:
            self.query_one(f"#{name}_error", Static).update("")

        try:
            product = ProductValidator.build(
                product_id,
                title=self._value("title"),
                description=self._value("description"),
                image_url=self._value("image_url"),
                external_url=self._value("external_url"),
                category=self._value("category"),
                price=self._value("price"),
            )
        except InvalidProduct as exc:
            self.problems = exc.problems
            for name, message in exc.problems.items():
                self.query_one(f"#{name}_error", Static).update(message)
            self.notify("Please fix the highlighted fields", severity="warning")
            return

        self.dismiss(product)


class ManageScreen(Screen[None]):
    """Admin product table with add, edit, delete and reset actions."""

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("n", "add", "Add"),
        Binding("e", "edit", "Edit"),
        Binding("d", "delete", "Delete"),
    ]

    def __init__(self, service: CatalogService) -> None:
        super().__init__()
        self.service = service
        self.rows: list[Product] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(
            Static("Product Management", id="manage_title"),
            Horizontal(
                Button("Add New Product", variant="primary", id="add_btn"),
                Button("Edit", id="edit_btn"),
                Button("Delete", variant="error", id="delete_btn"),
                Button("Reset Defaults", id="reset_btn"),
                Button("Back", id="back_btn"),
                classes="buttons",
            ),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="manage_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="manage_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        table = cast(
            DataTable[str | Text],
            self.query_one("#manage_table", DataTable),
        )
        table.add_columns("Title", "Category", "Price", "Description")
        self.populate_table()

    def populate_table(self) -> None:
        """Fill the admin table from the service's current products."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#manage_table", DataTable),
        )
        table.clear()
        self.rows = self.service.products()
        for p in self.rows:
            table.add_row(
                p.title,
                p.category,
                Text(f"${p.price:.2f}", justify="right"),
                p.description[:50],
            )

    def selected_product(self) -> Product | None:
        """The product under the table cursor, if any."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#manage_table", DataTable),
        )
        row = table.cursor_row
        if 0 <= row < len(self.rows):
            return self.rows[row]
        return None

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        actions = {
            "add_btn": self.action_add,
            "edit_btn": self.action_edit,
            "delete_btn": self.action_delete,
            "reset_btn": self.action_reset,
            "back_btn": self.action_back,
        }
        handler = actions.get(event.button.id or "")
        if handler is not None:
            handler()

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        event.stop()
        self.action_edit()

    def action_back(self) -> None:
        self.dismiss(None)

    def action_add(self) -> None:
        self.app.push_screen(ProductFormScreen(), self._save_new)

    def action_edit(self) -> None:
        product = self.selected_product()
        if product is None:
            self.notify("Select a product first", severity="warning")
            return
        self.app.push_screen(ProductFormScreen(product), self._save_edit)

    def action_delete(self) -> None:
        product = self.selected_product()
        if product is None:
            self.notify("Select a product first", severity="warning")
            return

        async def _confirmed(ok: bool | None) -> None:
            if ok:
                await self.delete_product(product)

        self.app.push_screen(
            ConfirmScreen(f"Delete '{product.title}'? This cannot be undone."),
            _confirmed,
        )

    def action_reset(self) -> None:
        async def _confirmed(ok: bool | None) -> None:
            if ok:
                await self.reset_products()

        self.app.push_screen(
            ConfirmScreen("Replace every product with the defaults?"),
            _confirmed,
        )

    async def _save_new(self, product: Product | None) -> None:
        if product is not None:
            await self.add_product(product)

    async def _save_edit(self, product: Product | None) -> None:
        if product is not None:
            await self.update_product(product)

    # ── Service calls ────────────────────────────────────

    async def add_product(self, product: Product) -> None:
        """Add *product* and report the outcome."""
        try:
            await self.service.add(product)
        except CatalogError as exc:
            logger.error("Failed to add product", exc_info=True)
            self.notify(f"Add failed: {exc}", severity="error")
            return
        self.notify(f"{product.title} has been added")
        self.populate_table()

    async def update_product(self, product: Product) -> None:
        """Replace *product* and report the outcome."""
        try:
            await self.service.update(product)
        except CatalogError as exc:
            logger.error("Failed to update product", exc_info=True)
            self.notify(f"Update failed: {exc}", severity="error")
            return
        self.notify(f"{product.title} has been updated")
        self.populate_table()

    async def delete_product(self, product: Product) -> None:
        """Remove *product* and report the outcome."""
        try:
            await self.service.remove(product.id)
        except CatalogError as exc:
            logger.error("Failed to delete product", exc_info=True)
            self.notify(f"Delete failed: {exc}", severity="error")
            return
        self.notify("The product has been removed")
        self.populate_table()

    async def reset_products(self) -> None:
        """Restore the default products."""
        try:
            await self.service.reset_to_defaults()
        except CatalogError as exc:
            logger.error("Failed to reset catalog", exc_info=True)
            self.notify(f"Reset failed: {exc}", severity="error")
            return
        self.notify("Default products restored")
        self.populate_table()


class CatalogApp(App[object]):
    """Terminal storefront for the product catalog."""

    CSS = """
    #title, #manage_title, .dialog_title {
        text-style: bold;
        padding: 1 0;
    }
    #filter_bar, .buttons {
        height: auto;
        padding: 0 0 1 0;
    }
    #category_select {
        width: 40;
    }
    .dialog {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    LoginScreen, ConfirmScreen {
        align: center middle;
    }
    #login_error, .error {
        color: $error;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "admin", "Admin"),
        Binding("r", "reload", "Reload"),
        Binding("c", "copy_url", "Copy URL"),
    ]

    def __init__(
        self,
        service: CatalogService | None = None,
        gate: AdminGate | None = None,
    ) -> None:
        super().__init__()
        self.service = service or CatalogService()
        self.gate = gate or AdminGate()
        self.selected_category: str = Settings.ALL_CATEGORIES
        self.visible_products: list[Product] = []

    def compose(self) -> ComposeResult:
        """Build the storefront widget tree."""
        yield Header()
        yield Container(
            Static("🛍 Product Catalog", id="title"),
            Horizontal(
                Select(
                    [("All Products", Settings.ALL_CATEGORIES)],
                    value=Settings.ALL_CATEGORIES,
                    allow_blank=False,
                    id="category_select",
                ),
                id="filter_bar",
            ),
            Static("Loading...", id="status"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    async def on_mount(self) -> None:
        """Configure the table columns and load the catalog."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        table.add_columns("Title", "Category", "Price", "Description")
        await self.refresh_catalog()

    async def on_unmount(self) -> None:
        await self.service.close()

    async def refresh_catalog(self) -> None:
        """Reload products from storage and redraw the storefront."""
        await self.service.load_all()
        self.render_storefront()

    def render_storefront(self) -> None:
        """Redraw the category options and table from the service cache."""
        categories = self.service.list_categories()
        if (
            self.selected_category != Settings.ALL_CATEGORIES
            and self.selected_category not in categories
        ):
            self.selected_category = Settings.ALL_CATEGORIES

        select = cast(
            Select[str], self.query_one("#category_select", Select)
        )
        with select.prevent(Select.Changed):
            select.set_options(
                [("All Products", Settings.ALL_CATEGORIES)]
                + [(name, name) for name in categories]
            )
            select.value = self.selected_category
        self.populate_table()

    def populate_table(self) -> None:
        """Fill the DataTable with the products of the selected category."""
        table = cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )
        status = self.query_one("#status", Static)
        table.clear()
        self.visible_products = self.service.filter_by_category(
            self.selected_category
        )

        for p in self.visible_products:
            table.add_row(
                p.title[:60],
                p.category,
                Text(f"${p.price:.2f}", style="bold green"),
                p.description[:60],
            )

        if self.visible_products:
            message = f"Showing {len(self.visible_products)} products"
            if self.service.degraded:
                message += " (storage unavailable, showing defaults)"
            status.update(message)
        else:
            status.update("No products found in this category.")

    def on_select_changed(self, event: Select.Changed) -> None:
        """Apply a new category selection."""
        if event.select.id != "category_select":
            return
        if isinstance(event.value, str):
            self.selected_category = event.value
            self.populate_table()

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the selected product's marketplace listing."""
        if event.data_table.id != "products_table":
            return
        if 0 <= event.cursor_row < len(self.visible_products):
            webbrowser.open(self.visible_products[event.cursor_row].external_url)

    async def action_reload(self) -> None:
        """Reload products from storage."""
        await self.refresh_catalog()
        self.notify("Catalog reloaded")

    def action_admin(self) -> None:
        """Open the admin screens, asking for the password first."""
        if len(self.screen_stack) > 1:
            return
        if self.gate.authorized:
            self._open_management()
            return

        def _after_login(authorized: bool | None) -> None:
            if authorized:
                self.notify("Welcome to the admin dashboard")
                self._open_management()

        self.push_screen(LoginScreen(self.gate), _after_login)

    def _open_management(self) -> None:
        def _after_manage(_result: None) -> None:
            self.render_storefront()

        self.push_screen(ManageScreen(self.service), _after_manage)

    def action_copy_url(self) -> None:
        """Copy the selected product's marketplace URL to the clipboard."""
        try:
            import pyperclip  # type: ignore[import-untyped]

            table = cast(
                DataTable[str | Text],
                self.query_one("#products_table", DataTable),
            )
            row = table.cursor_row
            pyperclip.copy(self.visible_products[row].external_url)
            self.notify("URL Copied")
        except Exception:
            logger.error(
                "Failed to copy URL to clipboard",
                exc_info=True,
            )
            self.notify(
                "Install pyperclip", severity="warning"
            )
