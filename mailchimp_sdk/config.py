API_VERSION = "3.0"
API_URL_TEMPLATE = "https://{data_center}.api.mailchimp.com/" + API_VERSION
API_KEY_SEPARATOR = "-"
API_KEY_FORMAT_EXAMPLE = "xyz-us11"

BATCHES_PATH = "/batches"
SUBSCRIBED_STATUS = "subscribed"

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
}
