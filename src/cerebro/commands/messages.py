"""
User-visible messages shared across commands and parsers.
"""

from cerebro.model.company import Company

MESSAGE_UNKNOWN_COMMAND = (
    "Unknown command! Use `help` to view a summary of commands available"
)
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_COMPANIES_LISTED_OVERVIEW = "{count} companies listed!"
NONE_PLACEHOLDER = "None"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)


def format_company(company: Company) -> str:
    """Format a company for display, showing absent fields as None."""
    tags = "".join(str(tag) for tag in company.sorted_tags()) or NONE_PLACEHOLDER
    return (
        f"{company.name}"
        f"; Phone: {company.phone.value or NONE_PLACEHOLDER}"
        f"; Email: {company.email.value or NONE_PLACEHOLDER}"
        f"; Address: {company.address.value or NONE_PLACEHOLDER}"
        f"; Status: {company.status}"
        f"; Tags: {tags}"
        f"; Remarks: {company.remark.value or NONE_PLACEHOLDER}"
    )
