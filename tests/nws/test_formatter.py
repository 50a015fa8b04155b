from weathermcp.nws import AlertRecord, ForecastPeriod, format_alert, format_forecast_period, format_number


def test_format_alert():
    alert = AlertRecord.model_validate({
        "event": "Heat Advisory",
        "areaDesc": "Fresno; Kern",
        "severity": "Moderate",
        "status": "Actual",
        "headline": "Heat Advisory issued July 10 by NWS Hanford CA",
        "description": "Ignored by the formatter"
    })

    assert format_alert(alert) == (
        "Event: Heat Advisory\n"
        "Area: Fresno; Kern\n"
        "Severity: Moderate\n"
        "Status: Actual\n"
        "Headline: Heat Advisory issued July 10 by NWS Hanford CA\n"
        "---"
    )


def test_format_alert_placeholders():
    expected = (
        "Event: Unknown\n"
        "Area: Unknown\n"
        "Severity: Unknown\n"
        "Status: Unknown\n"
        "Headline: No headline\n"
        "---"
    )
    assert format_alert(AlertRecord()) == expected
    # Empty strings and nulls count as missing
    assert format_alert(AlertRecord.model_validate({"event": "", "headline": None})) == expected
    # Deterministic
    assert format_alert(AlertRecord()) == format_alert(AlertRecord())


def test_format_alert_passes_text_through():
    alert = AlertRecord(event="Flood Warning", headline="Line one\nLine two")
    assert "Headline: Line one\nLine two\n---" in format_alert(alert)


def test_format_forecast_period():
    period = ForecastPeriod.model_validate({
        "number": 1,
        "name": "Tonight",
        "temperature": 58,
        "temperatureUnit": "F",
        "windSpeed": "5 to 10 mph",
        "windDirection": "SW",
        "shortForecast": "Mostly Clear",
        "detailedForecast": "Ignored by the formatter"
    })

    assert format_forecast_period(period) == (
        "Tonight:\n"
        "Temperature: 58°F\n"
        "Wind: 5 to 10 mph SW\n"
        "Mostly Clear\n"
        "---"
    )


def test_format_forecast_period_placeholders():
    assert format_forecast_period(ForecastPeriod()) == (
        "Unknown:\n"
        "Temperature: Unknown°F\n"
        "Wind: Unknown \n"
        "No forecast available\n"
        "---"
    )


def test_format_forecast_period_zero_temperature():
    period = ForecastPeriod(name="Overnight", temperature=0, temperatureUnit="C")
    assert "Temperature: 0°C" in format_forecast_period(period)


def test_format_forecast_period_fractional_temperature():
    period = ForecastPeriod(name="Today", temperature=21.5, temperatureUnit="C")
    assert "Temperature: 21.5°C" in format_forecast_period(period)


def test_format_number():
    assert format_number(40.0) == "40"
    assert format_number(-74) == "-74"
    assert format_number(37.7749) == "37.7749"
    assert format_number(-122.4194) == "-122.4194"
