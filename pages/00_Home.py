import streamlit as st

from utils.settings import get_app_settings
from utils.ui_layout import init_page_layout, render_footer

init_page_layout(
    get_app_settings(),
    main_title="Transaction Processor guide",
    description="Which values are accepted and how the controls behave.",
)

st.markdown(
    """
## Enter your values
- Type numbers separated by commas, e.g. `10.5, 25, 3.14, 100, 7.89`.
- Spaces around values are ignored, and so are empty entries from doubled or trailing commas (`1,,2,` holds two values).

### Accepted formats
- Integers with an optional sign: `5`, `-12`, `+7`.
- Decimals: `3.14`, `5.` (read as 5) and `.5` (read as 0.5).

### Rejected formats
- Scientific notation such as `1e3`.
- `Infinity` and `NaN`, in any capitalisation.
- More than one decimal point (`3.14.15`), a lone sign or dot, and any other text.
- Thousands separators and decimal commas are not supported; a comma always starts a new value.

### Controls
1) **Process Values** validates the input. It stays disabled while the box is empty.
2) If any value is malformed, every problem is listed with its position among the non-empty entries, and no results are shown.
3) Otherwise the values are listed in ascending order with the total count, the current order and the range.
4) The sort button flips between ascending and descending; the range does not change.
5) **Reset** clears the input and the results. It is enabled once values have been processed.
6) Download the sorted values as CSV, or enable **Debug mode** in the sidebar to inspect how the input was parsed.
    """
)

render_footer()
