import logging

import pandas as pd
from shiny import reactive, render
from shiny.express import input, ui
from shinywidgets import render_plotly

# Import organized modules
from fars.config import (
    DEFAULT_STATE,
    DEFAULT_YEAR_RANGE,
    GLOBAL_YEAR_MAX,
    GLOBAL_YEAR_MIN,
    MONTH_LABELS,
    STATE_NAMES,
)
from fars.errors import InvalidStateError
from fars.pipeline import fars_summarize_years
from fars.plotting import fars_map_state

logger = logging.getLogger(__name__)

# Helpers for UI mapping
STATE_CHOICES = {str(code): name for code, name in STATE_NAMES.items()}
YEAR_CHOICES = [str(year) for year in range(GLOBAL_YEAR_MIN, GLOBAL_YEAR_MAX + 1)]


# ======================================================
#  REACTIVE STATE
# ======================================================
@reactive.calc
def summary_table():
    year_start, year_end = input.year_range()
    return fars_summarize_years(range(year_start, year_end + 1))


# ======================================================
#  UI LAYOUT
# ======================================================
ui.page_opts(
    title="FARS fatal accidents",
    fillable=False,
    full_width=True,
    lang="en",
)

with ui.sidebar(open="always", position="right"):
    ui.input_slider(
        "year_range",
        "Years to summarize",
        min=GLOBAL_YEAR_MIN,
        max=GLOBAL_YEAR_MAX,
        value=DEFAULT_YEAR_RANGE,
        step=1,
        sep="",
    )
    ui.input_select(
        "state", "State to map", STATE_CHOICES, selected=str(DEFAULT_STATE)
    )
    ui.input_select("map_year", "Year to map", YEAR_CHOICES, selected=YEAR_CHOICES[0])


with ui.navset_tab(id="main_tabs"):
    with ui.nav_panel("Monthly summary"):

        @render.data_frame
        def summary_grid():
            table = summary_table().copy()
            if table.empty:
                return render.DataGrid(pd.DataFrame({"Month": []}))
            # Grid headers must be strings; year labels are ints.
            table.columns = [str(col) for col in table.columns]
            table.insert(
                0, "Month", [MONTH_LABELS[int(m) - 1] for m in table["MONTH"]]
            )
            return render.DataGrid(table.drop(columns=["MONTH"]), height=500)

    with ui.nav_panel("State map"):
        with ui.div(style="display:flex; justify-content:center;"):

            @render_plotly
            def state_map():
                try:
                    return fars_map_state(input.state(), input.map_year(), show=False)
                except (FileNotFoundError, InvalidStateError) as exc:
                    logger.warning("Cannot map state %s: %s", input.state(), exc)
                    return None
