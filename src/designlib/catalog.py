"""Curated design-system catalogs.

Each entry is matched against the case-folded identifier by its ``patterns``
in table order. Keep patterns specific enough that no realistic URL matches
two entries; ``tests/unit/test_registry.py`` guards this.
"""

# ruff: noqa: E501

from __future__ import annotations

from designlib.models.library import LibraryComponent
from designlib.models.registry import RegistryEntry


def _components(rows: list[tuple[str, str, str, str]]) -> tuple[LibraryComponent, ...]:
    return tuple(
        LibraryComponent(id=id_, name=name, category=category, description=description)
        for id_, name, category, description in rows
    )


CURATED_ENTRIES: tuple[RegistryEntry, ...] = (
    RegistryEntry(
        patterns=[r"shadcn", r"ui\.shadcn"],
        name="shadcn/ui",
        description="Beautifully designed components built with Radix UI and Tailwind CSS",
        source_url="https://github.com/shadcn-ui/ui",
        components=_components(
            [
                ("shadcn-accordion", "Accordion", "Disclosure", "A vertically stacked set of interactive headings that reveal content"),
                ("shadcn-alert", "Alert", "Feedback", "Displays a callout for user attention"),
                ("shadcn-alert-dialog", "Alert Dialog", "Overlay", "A modal dialog that interrupts the user with important content"),
                ("shadcn-aspect-ratio", "Aspect Ratio", "Layout", "Displays content within a desired ratio"),
                ("shadcn-avatar", "Avatar", "Data Display", "An image element with a fallback for representing the user"),
                ("shadcn-badge", "Badge", "Data Display", "Displays a badge or a component that looks like a badge"),
                ("shadcn-breadcrumb", "Breadcrumb", "Navigation", "Displays the path to the current resource using a hierarchy of links"),
                ("shadcn-button", "Button", "Actions", "Displays a button or a component that looks like a button"),
                ("shadcn-calendar", "Calendar", "Date & Time", "A date field component that allows users to enter and edit date"),
                ("shadcn-card", "Card", "Layout", "Displays a card with header, content, and footer"),
                ("shadcn-carousel", "Carousel", "Data Display", "A carousel with motion and swipe built using Embla"),
                ("shadcn-chart", "Chart", "Data Display", "Beautiful charts built using Recharts"),
                ("shadcn-checkbox", "Checkbox", "Forms", "A control that allows the user to toggle between checked and not checked"),
                ("shadcn-collapsible", "Collapsible", "Disclosure", "An interactive component which expands/collapses a panel"),
                ("shadcn-combobox", "Combobox", "Forms", "Autocomplete input and command palette with a list of suggestions"),
                ("shadcn-command", "Command", "Navigation", "Fast, composable, unstyled command menu"),
                ("shadcn-context-menu", "Context Menu", "Overlay", "Displays a menu at the pointer position on right-click"),
                ("shadcn-data-table", "Data Table", "Data Display", "Powerful table and datagrids built using TanStack Table"),
                ("shadcn-date-picker", "Date Picker", "Date & Time", "A date picker component with range and presets"),
                ("shadcn-dialog", "Dialog", "Overlay", "A window overlaid on the primary window, rendering content underneath inert"),
                ("shadcn-drawer", "Drawer", "Overlay", "A drawer component for React built on top of Vaul"),
                ("shadcn-dropdown-menu", "Dropdown Menu", "Overlay", "Displays a menu of actions/options triggered by a button"),
                ("shadcn-form", "Form", "Forms", "Building forms with React Hook Form and Zod"),
                ("shadcn-hover-card", "Hover Card", "Overlay", "For sighted users to preview content available behind a link"),
                ("shadcn-input", "Input", "Forms", "Displays a form input field"),
                ("shadcn-input-otp", "Input OTP", "Forms", "Accessible one-time password component with copy paste functionality"),
                ("shadcn-label", "Label", "Forms", "Renders an accessible label associated with controls"),
                ("shadcn-menubar", "Menubar", "Navigation", "A visually persistent menu common in desktop applications"),
                ("shadcn-navigation-menu", "Navigation Menu", "Navigation", "A collection of links for navigating websites"),
                ("shadcn-pagination", "Pagination", "Navigation", "Pagination with page navigation, next and previous links"),
                ("shadcn-popover", "Popover", "Overlay", "Displays rich content in a portal, triggered by a button"),
                ("shadcn-progress", "Progress", "Feedback", "Displays an indicator showing the completion progress of a task"),
                ("shadcn-radio-group", "Radio Group", "Forms", "A set of checkable buttons where only one can be checked at a time"),
                ("shadcn-resizable", "Resizable", "Layout", "Accessible resizable panel groups and layouts with keyboard support"),
                ("shadcn-scroll-area", "Scroll Area", "Layout", "Augments native scroll functionality for custom, cross-browser styling"),
                ("shadcn-select", "Select", "Forms", "Displays a list of options for the user to pick from"),
                ("shadcn-separator", "Separator", "Layout", "Visually or semantically separates content"),
                ("shadcn-sheet", "Sheet", "Overlay", "Extends the Dialog component to display content that complements the page"),
                ("shadcn-sidebar", "Sidebar", "Navigation", "A composable, themeable and customizable sidebar component"),
                ("shadcn-skeleton", "Skeleton", "Feedback", "Use to show a placeholder while content is loading"),
                ("shadcn-slider", "Slider", "Forms", "An input where the user selects a value from within a given range"),
                ("shadcn-sonner", "Sonner", "Feedback", "An opinionated toast component"),
                ("shadcn-switch", "Switch", "Forms", "A control that allows the user to toggle between two states"),
                ("shadcn-table", "Table", "Data Display", "A responsive table component"),
                ("shadcn-tabs", "Tabs", "Navigation", "A set of layered sections of content, known as tab panels"),
                ("shadcn-textarea", "Textarea", "Forms", "Displays a form textarea"),
                ("shadcn-toast", "Toast", "Feedback", "A succinct message that is displayed temporarily"),
                ("shadcn-toggle", "Toggle", "Actions", "A two-state button that can be either on or off"),
                ("shadcn-toggle-group", "Toggle Group", "Actions", "A set of two-state buttons that can be toggled on or off"),
                ("shadcn-tooltip", "Tooltip", "Overlay", "A popup that displays information related to an element"),
            ]
        ),
    ),
    RegistryEntry(
        patterns=[r"radix-ui", r"radix\.com", r"radixui"],
        name="Radix UI",
        description="Unstyled, accessible components for building high-quality design systems",
        source_url="https://github.com/radix-ui/primitives",
        components=_components(
            [
                ("radix-accordion", "Accordion", "Disclosure", "A vertically stacked set of interactive headings"),
                ("radix-alert-dialog", "Alert Dialog", "Overlay", "A modal dialog that interrupts the user"),
                ("radix-aspect-ratio", "Aspect Ratio", "Layout", "Displays content within a desired ratio"),
                ("radix-avatar", "Avatar", "Data Display", "An image element with a fallback for representing the user"),
                ("radix-checkbox", "Checkbox", "Forms", "A control that allows the user to toggle between checked and not checked"),
                ("radix-collapsible", "Collapsible", "Disclosure", "An interactive component which expands/collapses a panel"),
                ("radix-context-menu", "Context Menu", "Overlay", "Displays a menu at the pointer position"),
                ("radix-dialog", "Dialog", "Overlay", "A window overlaid on the primary window"),
                ("radix-dropdown-menu", "Dropdown Menu", "Overlay", "Displays a menu of actions to the user"),
                ("radix-form", "Form", "Forms", "Primitives for building accessible forms"),
                ("radix-hover-card", "Hover Card", "Overlay", "Preview content behind a link"),
                ("radix-label", "Label", "Forms", "An accessible label for controls"),
                ("radix-menubar", "Menubar", "Navigation", "A visually persistent menu for desktop apps"),
                ("radix-navigation-menu", "Navigation Menu", "Navigation", "A collection of links for navigating websites"),
                ("radix-popover", "Popover", "Overlay", "Displays rich content in a portal"),
                ("radix-progress", "Progress", "Feedback", "Displays completion progress"),
                ("radix-radio-group", "Radio Group", "Forms", "A set of checkable buttons"),
                ("radix-scroll-area", "Scroll Area", "Layout", "Custom cross-browser scroll area"),
                ("radix-select", "Select", "Forms", "Displays a list of options for the user to pick from"),
                ("radix-separator", "Separator", "Layout", "Visually separates content"),
                ("radix-slider", "Slider", "Forms", "An input where the user selects a value from a range"),
                ("radix-switch", "Switch", "Forms", "A control to toggle between two states"),
                ("radix-tabs", "Tabs", "Navigation", "Layered sections of content"),
                ("radix-toast", "Toast", "Feedback", "A succinct temporary message"),
                ("radix-toggle", "Toggle", "Actions", "A two-state button"),
                ("radix-toggle-group", "Toggle Group", "Actions", "A set of two-state buttons"),
                ("radix-toolbar", "Toolbar", "Navigation", "A container for grouping controls"),
                ("radix-tooltip", "Tooltip", "Overlay", "A popup that displays information"),
            ]
        ),
    ),
    RegistryEntry(
        patterns=[r"mui\.com", r"material-ui", r"material.*design", r"mui/material", r"@mui"],
        name="Material UI 3",
        description="Material Design 3 components — Google's open-source design system for React",
        source_url="https://mui.com/material-ui/",
        components=_components(
            [
                ("mui-autocomplete", "Autocomplete", "Inputs", "A text input enhanced by a panel of suggested options"),
                ("mui-button", "Button", "Inputs", "Buttons allow users to take actions with a single tap"),
                ("mui-button-group", "Button Group", "Inputs", "Group a series of buttons together on a single line"),
                ("mui-checkbox", "Checkbox", "Inputs", "Checkboxes allow the user to select items from a set"),
                ("mui-fab", "Floating Action Button", "Inputs", "A circular button that triggers the primary action"),
                ("mui-radio", "Radio Group", "Inputs", "Allows the user to select one option from a set"),
                ("mui-rating", "Rating", "Inputs", "Provide insight into others opinions and experiences"),
                ("mui-select", "Select", "Inputs", "Select components are used for collecting user-provided information"),
                ("mui-slider", "Slider", "Inputs", "Sliders allow users to make selections from a range of values"),
                ("mui-switch", "Switch", "Inputs", "Switches toggle the state of a single setting on or off"),
                ("mui-text-field", "Text Field", "Inputs", "Text fields let users enter and edit text"),
                ("mui-toggle-button", "Toggle Button", "Inputs", "Toggle buttons can be used to group related options"),
                ("mui-avatar", "Avatar", "Data Display", "Avatars are found throughout material design"),
                ("mui-badge", "Badge", "Data Display", "Badge generates a small badge to its children"),
                ("mui-chip", "Chip", "Data Display", "Chips represent complex entities in small blocks"),
                ("mui-divider", "Divider", "Data Display", "A thin line that groups content in lists and layouts"),
                ("mui-icon", "Icon", "Data Display", "Material icons from the Material Design spec"),
                ("mui-list", "List", "Data Display", "Lists are continuous, vertical indexes of text or images"),
                ("mui-table", "Table", "Data Display", "Tables display sets of data across rows and columns"),
                ("mui-tooltip", "Tooltip", "Data Display", "Tooltips display informative text on hover"),
                ("mui-typography", "Typography", "Data Display", "Use typography to present content clearly"),
                ("mui-alert", "Alert", "Feedback", "An alert displays a short, important message"),
                ("mui-backdrop", "Backdrop", "Feedback", "The backdrop signals a state change and can be used for loaders"),
                ("mui-dialog", "Dialog", "Feedback", "Dialogs inform users about a task or important information"),
                ("mui-progress", "Progress", "Feedback", "Progress indicators inform users about the status of ongoing processes"),
                ("mui-skeleton", "Skeleton", "Feedback", "Display a placeholder preview of content before data is loaded"),
                ("mui-snackbar", "Snackbar", "Feedback", "Snackbars provide brief notifications"),
                ("mui-accordion", "Accordion", "Surfaces", "An accordion is a lightweight container"),
                ("mui-app-bar", "App Bar", "Surfaces", "The App Bar displays information and actions"),
                ("mui-card", "Card", "Surfaces", "Cards contain content and actions about a single subject"),
                ("mui-paper", "Paper", "Surfaces", "Physical properties of paper translated to the screen"),
                ("mui-bottom-nav", "Bottom Navigation", "Navigation", "Navigation bars at the bottom of the screen"),
                ("mui-breadcrumbs", "Breadcrumbs", "Navigation", "Breadcrumbs allow users to navigate between levels"),
                ("mui-drawer", "Drawer", "Navigation", "Navigation drawers provide access to destinations"),
                ("mui-link", "Link", "Navigation", "The Link component lets you customize anchor elements"),
                ("mui-menu", "Menu", "Navigation", "Menus display a list of choices on temporary surfaces"),
                ("mui-pagination", "Pagination", "Navigation", "Pagination separates long sets of data across pages"),
                ("mui-speed-dial", "Speed Dial", "Navigation", "A floating action button that can display related actions"),
                ("mui-stepper", "Stepper", "Navigation", "Steppers convey progress through numbered steps"),
                ("mui-tabs", "Tabs", "Navigation", "Tabs make it easy to explore and switch between views"),
                ("mui-box", "Box", "Layout", "The Box component serves as a wrapper component"),
                ("mui-container", "Container", "Layout", "The container centers content horizontally"),
                ("mui-grid", "Grid", "Layout", "The responsive layout grid adapts to screen size"),
                ("mui-stack", "Stack", "Layout", "Stack manages layout of immediate children along the vertical or horizontal axis"),
            ]
        ),
    ),
    RegistryEntry(
        patterns=[r"fluent", r"fluentui", r"fluent-ui", r"fluent2"],
        name="Fluent UI",
        description="Microsoft's cross-platform design system for creating adaptive, accessible experiences",
        source_url="https://github.com/microsoft/fluentui",
        components=_components(
            [
                ("fluent-button", "Button", "Actions", "Triggers an action or event"),
                ("fluent-compound-button", "Compound Button", "Actions", "Button with a primary and secondary text"),
                ("fluent-menu-button", "Menu Button", "Actions", "A button that opens a menu"),
                ("fluent-split-button", "Split Button", "Actions", "A button with a primary and menu action"),
                ("fluent-toggle-button", "Toggle Button", "Actions", "A button that can be toggled on or off"),
                ("fluent-link", "Link", "Actions", "An anchor element styled as a link"),
                ("fluent-checkbox", "Checkbox", "Inputs", "Allows users to toggle a check"),
                ("fluent-combobox", "Combobox", "Inputs", "A select with text input for filtering"),
                ("fluent-dropdown", "Dropdown", "Inputs", "A select component for choosing options"),
                ("fluent-field", "Field", "Inputs", "Wrapper providing label, validation, and hints"),
                ("fluent-input", "Input", "Inputs", "A single-line text input"),
                ("fluent-radio-group", "Radio Group", "Inputs", "A group of exclusive options"),
                ("fluent-search-box", "SearchBox", "Inputs", "Input for search queries"),
                ("fluent-select", "Select", "Inputs", "A native select wrapper"),
                ("fluent-slider", "Slider", "Inputs", "An input for selecting a value from a range"),
                ("fluent-spinbutton", "SpinButton", "Inputs", "Number input with increment/decrement"),
                ("fluent-switch", "Switch", "Inputs", "Toggle between two states"),
                ("fluent-textarea", "Textarea", "Inputs", "Multi-line text input"),
                ("fluent-avatar", "Avatar", "Data Display", "Graphical representation of a user"),
                ("fluent-avatar-group", "Avatar Group", "Data Display", "A group of avatar components"),
                ("fluent-badge", "Badge", "Data Display", "A visual indicator"),
                ("fluent-counter-badge", "Counter Badge", "Data Display", "A badge for showing counts"),
                ("fluent-data-grid", "Data Grid", "Data Display", "A grid for displaying tabular data"),
                ("fluent-label", "Label", "Data Display", "A text label for controls"),
                ("fluent-persona", "Persona", "Data Display", "A visual representation of a person"),
                ("fluent-tag", "Tag", "Data Display", "A compact element for categorization"),
                ("fluent-text", "Text", "Data Display", "A typography component"),
                ("fluent-tree", "Tree", "Data Display", "A hierarchical list"),
                ("fluent-alert", "Alert", "Feedback", "Displays a brief important message"),
                ("fluent-dialog", "Dialog", "Feedback", "A modal overlay"),
                ("fluent-drawer", "Drawer", "Feedback", "A panel that slides from the edge"),
                ("fluent-message-bar", "MessageBar", "Feedback", "An inline status message"),
                ("fluent-progress-bar", "ProgressBar", "Feedback", "Shows task progress"),
                ("fluent-skeleton", "Skeleton", "Feedback", "A placeholder while content loads"),
                ("fluent-spinner", "Spinner", "Feedback", "An indeterminate progress indicator"),
                ("fluent-toast", "Toast", "Feedback", "Temporary notification"),
                ("fluent-breadcrumb", "Breadcrumb", "Navigation", "Shows the navigation trail"),
                ("fluent-menu", "Menu", "Navigation", "A list of actions on a temporary surface"),
                ("fluent-nav", "Nav", "Navigation", "Side navigation panel"),
                ("fluent-overflow", "Overflow", "Navigation", "Manages items that overflow a container"),
                ("fluent-tab-list", "TabList", "Navigation", "A set of tabs for switching views"),
                ("fluent-toolbar", "Toolbar", "Navigation", "A container for grouping commands"),
                ("fluent-card", "Card", "Layout", "A flexible container for content"),
                ("fluent-divider", "Divider", "Layout", "A visual separator"),
                ("fluent-accordion", "Accordion", "Layout", "Expandable content sections"),
                ("fluent-popover", "Popover", "Layout", "Content displayed in a portal"),
                ("fluent-tooltip", "Tooltip", "Layout", "Informational text on hover"),
            ]
        ),
    ),
    RegistryEntry(
        patterns=[r"liquid.?glass", r"apple.*glass", r"glass.*apple", r"developer\.apple\.com"],
        name="Apple Liquid Glass",
        description="Apple's translucent, depth-aware design language introduced in 2025",
        source_url="https://developer.apple.com/design/",
        components=_components(
            [
                ("glass-button", "Glass Button", "Controls", "A translucent button with frosted-glass material and depth response"),
                ("glass-toggle", "Glass Toggle", "Controls", "A toggle switch with liquid glass material"),
                ("glass-segmented-control", "Segmented Control", "Controls", "A segmented picker with glass-morphic segments"),
                ("glass-slider", "Glass Slider", "Controls", "A slider with glass track and knob"),
                ("glass-stepper", "Stepper", "Controls", "Increment/decrement control with glass material"),
                ("glass-picker", "Picker", "Controls", "A selection wheel with depth and transparency"),
                ("glass-color-picker", "Color Picker", "Controls", "A glass-styled color selection control"),
                ("glass-date-picker", "Date Picker", "Controls", "Date and time selection with liquid glass chrome"),
                ("glass-tab-bar", "Tab Bar", "Navigation", "Bottom tab navigation with translucent glass background"),
                ("glass-navigation-bar", "Navigation Bar", "Navigation", "Top navigation bar with glass material and blur"),
                ("glass-sidebar", "Sidebar", "Navigation", "A translucent sidebar with depth-aware layering"),
                ("glass-toolbar", "Toolbar", "Navigation", "A floating glass toolbar with contextual actions"),
                ("glass-search-bar", "Search Bar", "Navigation", "A glass-styled search input with live filtering"),
                ("glass-card", "Glass Card", "Presentation", "A content card with frosted-glass background and specular highlights"),
                ("glass-sheet", "Glass Sheet", "Presentation", "A modal sheet with glass material, swipe to dismiss"),
                ("glass-alert", "Glass Alert", "Presentation", "An alert dialog with translucent glass backdrop"),
                ("glass-notification", "Notification Banner", "Presentation", "A notification banner with glass material"),
                ("glass-popover", "Glass Popover", "Presentation", "A floating popover with depth shadow and glass fill"),
                ("glass-menu", "Context Menu", "Presentation", "A context menu with liquid glass material"),
                ("glass-tooltip", "Glass Tooltip", "Presentation", "An informational tooltip with glass material"),
                ("glass-panel", "Glass Panel", "Layout", "A general-purpose translucent container with blur and depth"),
                ("glass-group-box", "Group Box", "Layout", "A grouped container with subtle glass border"),
                ("glass-list", "Glass List", "Layout", "A list view with glass row separators and translucency"),
                ("glass-scroll-view", "Scroll View", "Layout", "A scrollable container with fading glass edges"),
                ("glass-split-view", "Split View", "Layout", "A resizable split layout with glass divider"),
                ("glass-avatar", "Glass Avatar", "Data Display", "User avatar with glass ring and depth shadow"),
                ("glass-badge", "Glass Badge", "Data Display", "A notification badge with translucent material"),
                ("glass-progress", "Glass Progress", "Data Display", "A progress indicator with glass track and fill"),
                ("glass-tag", "Glass Tag", "Data Display", "A label tag with glass-morphic appearance"),
                ("glass-text-field", "Glass Text Field", "Forms", "A text input with frosted-glass background"),
                ("glass-text-editor", "Glass Text Editor", "Forms", "A multi-line text area with glass material"),
                ("glass-checkbox", "Glass Checkbox", "Forms", "A checkbox with glass material and check animation"),
                ("glass-radio", "Glass Radio", "Forms", "Radio buttons with liquid glass indicators"),
            ]
        ),
    ),
)
