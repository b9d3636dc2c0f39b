"""Static metadata describing AssessQt."""

APP_NAME = "AssessQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "AssessQt is a self-assessment survey built with Qt. "
    "Work through each category in order, rate every statement, "
    "and follow your scores and recommended actions on the dashboard."
)

HELP_TEXT = (
    "Categories and subcategories come from Heading.csv in the data directory:\n\n"
    "icon,category,subcategory,legend\n"
    "fa-star,Data Quality,Accuracy,\"1-Poor,5-Excellent\"\n"
    "fa-star,Data Quality,Completeness,\n\n"
    "Questions for a category live in a file named after the category, e.g. "
    "'Data Quality.csv':\n\n"
    "category,subcategory,question,definition,options\n"
    "Data Quality,Accuracy,How often is data validated?,Accuracy measures ...,\"1,2,3,4,5\"\n\n"
    "Subcategories unlock one at a time: finish the current one to open the next."
)
