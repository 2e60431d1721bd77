from cpm.services.scheduler import CPMScheduler
from cpm.utils.console import format_report


def create_sample_project(verbose=True):
    """Schedule a small software project and print the CPM report."""
    scheduler = CPMScheduler()

    # Create activities
    scheduler.add_activity("REQ", 5, "-")  # Requirements analysis
    scheduler.add_activity("DES", 10, "REQ")  # System design
    scheduler.add_activity("FE", 15, "DES")  # Frontend development
    scheduler.add_activity("BE", 12, "DES")  # Backend development
    scheduler.add_activity("DB", 8, "DES")  # Database setup
    scheduler.add_activity("INT", 6, "FE,BE,DB")  # Integration
    scheduler.add_activity("DOC", 4, "DES")  # User documentation
    scheduler.add_activity("TST", 8, "INT")  # Testing
    scheduler.add_activity("DEP", 3, "TST,DOC")  # Deployment

    # Run the scheduling algorithm
    schedule = scheduler.schedule()

    if verbose:
        print("CPM Project Schedule Report")
        print("===========================")
        print(format_report(schedule))

    return schedule


if __name__ == "__main__":
    create_sample_project()
