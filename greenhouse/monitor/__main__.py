"""Greenhouse monitor entrypoint.

Samples temperature, humidity and pressure, logs each reading, decides the
heater and humidifier states and tracks active alarms.

Usage: python -m greenhouse.monitor
"""

from greenhouse.monitor.polling import main

if __name__ == "__main__":
    main()
