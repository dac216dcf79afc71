"""NEIS open API school meal service constants.

API docs: https://open.neis.go.kr/portal/data/service/selectServicePage.do?infId=OPEN17320190722180924242823
"""

MEAL_SERVICE_API = "https://open.neis.go.kr/hub/mealServiceDietInfo"

#: Top-level array in a successful response: ``[head, {"row": [...]}]``.
RESULT_KEY = "mealServiceDietInfo"

#: Row field holding ``<br/>``-separated dish names.
DISH_FIELD = "DDISH_NM"
