"""Demo filter set over the customers table."""

from src.filterset import FilterSet


class CustomerFilters(FilterSet):
    """Filters offered on the customer search form."""

    def filters(self):
        self.filter("text", "Customer Name", "customers.name")
        self.filter(
            "select", "Customer Type", "customers.customer_type",
            choices=["Customer", "Prospect", "Lead"],
        )
        self.filter("date", "Customer Since", "customers.since")
        self.filter(
            "check_boxes", "Job Type", "customers.job_type",
            choices=[["HVAC", "1"], ["Electrical", 2], ["Plumbing", 3]],
        )
        self.filter("boolean", "Commercial?", "customers.commercial", allow_blank=True)
        self.filter(
            "radio_buttons", "Sex", "customers.sex",
            choices=[["Male", "m"], ["Female", "f"]],
        )
