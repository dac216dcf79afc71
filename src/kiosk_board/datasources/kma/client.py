"""KMA (data.go.kr) ultra-short-term forecast constants.

API docs: https://www.data.go.kr/data/15084084/openapi.do
"""

ULTRA_SRT_FCST_API = "https://apis.data.go.kr/1360000/VilageFcstInfoService_2.0/getUltraSrtFcst"

#: ``response.header.resultCode`` on success.
SUCCESS_CODE = "00"

#: Records requested per call; covers every category for the next 6 hours.
DEFAULT_ROWS = 60

# Forecast categories we read
CATEGORY_TEMPERATURE = "T1H"
CATEGORY_SKY = "SKY"

#: SKY codes: 1 clear, 3 mostly cloudy, 4 overcast.
SKY_EMOJI = {
    "1": "☀️",
    "3": "⛅",
    "4": "☁️",
}
