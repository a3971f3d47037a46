"""Gradio UI for the Voyage Quote Engine."""

from pathlib import Path
from typing import List, Optional, Tuple

import gradio as gr
from pydantic import ValidationError

from src.config.env_loader import load_environment_variables

# Load environment variables before settings are first read
load_environment_variables(Path(__file__).parent)

from src.config.settings import get_settings
from src.config.logging_config import get_logger, setup_logging
from src.config.messages import (
    ERROR_INVALID_SAIL_DATE,
    STATUS_NO_ADVISORIES,
    STATUS_NO_VESSEL_OPTIONS,
)
from src.core.quote_engine import QuoteEngine
from src.core.selection import allowed_vessel_classes, reconcile_vessel_selection
from src.models.query_models import QuoteRequest

logger = get_logger(__name__)


class VoyagePlannerInterface:
    """Form-state wrapper between Gradio components and the QuoteEngine.

    Owns the caller-side rules the engine relies on: the vessel selection
    is reconciled after every port change, and user input is parsed into
    a QuoteRequest before it reaches the engine.
    """

    def __init__(self, engine: Optional[QuoteEngine] = None):
        self.engine = engine or QuoteEngine()
        self.reference_data = self.engine.reference_data
        self.settings = get_settings()

    def format_amount(self, amount: int) -> str:
        return f"{self.settings.currency_symbol}{amount:,}"

    def port_summary(self, port_id: str) -> str:
        port = self.reference_data.get_port(port_id)
        if port is None:
            return ""
        vessels = ", ".join(port.vessel_classes) or STATUS_NO_VESSEL_OPTIONS
        return f"**{port.name}**  \n{port.tagline}  \n_{vessels}_"

    def vessel_hint(self, vessel_class: Optional[str]) -> str:
        vessel = self.reference_data.get_vessel_class(vessel_class)
        return vessel.style if vessel else ""

    def on_port_change(self, port_id: str, current_vessel: Optional[str]) -> Tuple[dict, str]:
        """Re-derive vessel choices for a newly selected port.

        Returns:
            Tuple of (vessel dropdown update, port summary markdown)
        """
        allowed = allowed_vessel_classes(self.reference_data, port_id)
        selected = reconcile_vessel_selection(self.reference_data, port_id, current_vessel)
        if selected != current_vessel:
            logger.info(f"Vessel selection reset from '{current_vessel}' to '{selected}' for port '{port_id}'")
        return gr.update(choices=allowed, value=selected), self.port_summary(port_id)

    def on_quote(
        self,
        port_id: str,
        vessel_class: Optional[str],
        sail_date: str,
        passengers: float,
        travel_style_id: str
    ) -> Tuple[str, str, str]:
        """Compute the estimate and advisories for the current form state.

        Returns:
            Tuple of (estimate markdown, vessel hint, advisories markdown)
        """
        try:
            request = QuoteRequest(
                port_id=port_id,
                vessel_class=vessel_class,
                passenger_count=int(passengers),
                sail_date=sail_date,
                travel_style_id=travel_style_id,
            )
        except ValidationError:
            return f"### {self.format_amount(0)}", self.vessel_hint(vessel_class), ERROR_INVALID_SAIL_DATE

        result = self.engine.quote(request)
        return (
            f"### {self.format_amount(result.estimate)}",
            self.vessel_hint(vessel_class),
            self.render_advisories(result.advisories),
        )

    @staticmethod
    def render_advisories(advisories: List[str]) -> str:
        if not advisories:
            return f"- {STATUS_NO_ADVISORIES}"
        return "\n".join(f"- {line}" for line in advisories)


def create_demo(planner: Optional[VoyagePlannerInterface] = None):
    """Create and return a Gradio demo for the voyage planner.

    Returns:
        gr.Blocks: Configured Gradio interface
    """
    planner = planner or VoyagePlannerInterface()
    reference_data = planner.reference_data
    settings = planner.settings

    first_port = reference_data.ports[0].id if reference_data.ports else None
    first_vessel = reconcile_vessel_selection(reference_data, first_port, None)

    with gr.Blocks(theme=gr.themes.Soft(), title=reference_data.brand_name) as demo:
        gr.Markdown(
            f"<h1 style='text-align: center; margin: 20px 0;'>Reserve your {reference_data.brand_name} voyage</h1>"
        )
        gr.Markdown(
            "<div style='text-align: center; margin: 20px 0; font-size: 16px;'>"
            "Choose a departure port and vessel type to reveal tailored pricing."
            "</div>"
        )
        with gr.Row():
            with gr.Column():
                port = gr.Radio(
                    choices=[(p.name, p.id) for p in reference_data.ports],
                    value=first_port,
                    label="Departure port",
                )
                port_info = gr.Markdown(planner.port_summary(first_port))
            with gr.Column():
                vessel = gr.Dropdown(
                    choices=allowed_vessel_classes(reference_data, first_port),
                    value=first_vessel,
                    label="Vessel type",
                )
                vessel_hint = gr.Markdown(planner.vessel_hint(first_vessel))
                with gr.Row():
                    sail_date = gr.Textbox(label="Target date", placeholder="YYYY-MM-DD")
                    passengers = gr.Slider(
                        minimum=settings.min_passengers,
                        maximum=settings.max_passengers,
                        value=settings.default_passengers,
                        step=1,
                        label="Guests",
                    )
                travel_style = gr.Dropdown(
                    choices=[(s.label, s.id) for s in reference_data.travel_styles],
                    value=reference_data.default_travel_style.id,
                    label="Voyage energy",
                )
                gr.Markdown("Estimated investment")
                estimate = gr.Markdown()

        gr.Markdown("## AI concierge guidance")
        insights = gr.Markdown()

        quote_inputs = [port, vessel, sail_date, passengers, travel_style]
        quote_outputs = [estimate, vessel_hint, insights]

        port.change(
            fn=planner.on_port_change,
            inputs=[port, vessel],
            outputs=[vessel, port_info],
        ).then(fn=planner.on_quote, inputs=quote_inputs, outputs=quote_outputs)
        for component in (vessel, sail_date, passengers, travel_style):
            component.change(fn=planner.on_quote, inputs=quote_inputs, outputs=quote_outputs)
        demo.load(fn=planner.on_quote, inputs=quote_inputs, outputs=quote_outputs)

    return demo


def main():
    """Main entry point for the voyage planner UI."""
    settings = get_settings()
    setup_logging(level=settings.log_level)
    logger.info(f"Starting voyage planner on http://{settings.server_host}:{settings.server_port}")

    demo = create_demo()
    demo.launch(
        server_name=settings.server_host,
        server_port=settings.server_port,
        share=False
    )


if __name__ == "__main__":
    main()
