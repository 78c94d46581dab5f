"""Process-wide default tables shared by every device session.

These are substituted whenever a device profile does not carry its own
override.  Codes follow the protocol V1 status/error numbering.
"""

from __future__ import annotations

from pyrobovac.state.declaration import StateDeclaration, boolean, json_value, number, text

# ------------------------------------------------------------------
# Status / error code tables
# ------------------------------------------------------------------

STATE_CODES: dict[int, str] = {
    0: "Unknown",
    1: "Initiating",
    2: "Sleeping",
    3: "Idle",
    4: "Remote Control",
    5: "Cleaning",
    6: "Returning Dock",
    7: "Manual Mode",
    8: "Charging",
    9: "Charging Error",
    10: "Paused",
    11: "Spot Cleaning",
    12: "In Error",
    13: "Shutting Down",
    14: "Updating",
    15: "Docking",
    16: "Go To",
    17: "Zone Clean",
    18: "Room Clean",
    22: "Emptying Dust Container",
    23: "Washing The Mop",
    26: "Going To Wash The Mop",
    28: "In Call",
    29: "Mapping",
    100: "Fully Charged",
}

ERROR_CODES: dict[int, str] = {
    0: "No error",
    1: "Laser sensor fault",
    2: "Collision sensor fault",
    3: "Wheel floating",
    4: "Cliff sensor fault",
    5: "Main brush blocked",
    6: "Side brush blocked",
    7: "Wheel blocked",
    8: "Device stuck",
    9: "Dust bin missing",
    10: "Filter blocked",
    11: "Magnetic field detected",
    12: "Low battery",
    13: "Charging problem",
    14: "Battery failure",
    15: "Wall sensor fault",
    16: "Uneven surface",
    17: "Side brush failure",
    18: "Suction fan failure",
    19: "Unpowered charging station",
    20: "Unknown error",
    21: "Laser pressure sensor problem",
    22: "Charge sensor problem",
    23: "Dock problem",
    24: "No-go zone or invisible wall detected",
    254: "Bin full",
    255: "Internal error",
}

# ------------------------------------------------------------------
# Consumables
# ------------------------------------------------------------------

CONSUMABLES: dict[str, StateDeclaration] = {
    "main_brush_work_time": number(name="Main brush work time", unit="s"),
    "side_brush_work_time": number(name="Side brush work time", unit="s"),
    "filter_work_time": number(name="Filter work time", unit="s"),
    "filter_element_work_time": number(name="Filter element work time", unit="s"),
    "sensor_dirty_time": number(name="Sensor dirty time", unit="s"),
    "strainer_work_times": number(name="Strainer work times"),
    "dust_collection_work_times": number(name="Dust collection work times"),
    "cleaning_brush_work_times": number(name="Cleaning brush work times"),
    "main_brush_life": number(name="Main brush life", unit="%", min=0, max=100),
    "side_brush_life": number(name="Side brush life", unit="%", min=0, max=100),
    "filter_life": number(name="Filter life", unit="%", min=0, max=100),
    "sensor_life": number(name="Sensor life", unit="%", min=0, max=100),
}

RESET_CONSUMABLES: frozenset[str] = frozenset(
    {
        "main_brush_work_time",
        "side_brush_work_time",
        "filter_work_time",
        "filter_element_work_time",
        "sensor_dirty_time",
        "strainer_work_times",
        "dust_collection_work_times",
        "cleaning_brush_work_times",
    }
)

# Default expected lifetime (hours) used when a profile has no override.
CONSUMABLE_LIFE_HOURS: dict[str, float] = {
    "main_brush_work_time": 300,
    "side_brush_work_time": 200,
    "filter_work_time": 150,
    "sensor_dirty_time": 30,
}

# ------------------------------------------------------------------
# Common declarations for generic status keys
# ------------------------------------------------------------------

DEVICE_STATES: dict[str, StateDeclaration] = {
    "battery": number(role="value.battery", name="Battery", unit="%", min=0, max=100),
    "clean_area": number(name="Clean area", unit="mm²"),
    "clean_time": number(name="Clean time", unit="s"),
    "in_cleaning": number(name="In cleaning"),
    "in_returning": number(name="In returning"),
    "in_fresh_state": number(name="In fresh state"),
    "lab_status": number(name="Lab status"),
    "water_box_status": number(name="Water box attached"),
    "water_box_carriage_status": number(name="Mop attached"),
    "dnd_enabled": number(name="Do not disturb"),
    "map_present": number(name="Map present"),
    "map_status": number(name="Map status"),
    "is_locating": number(name="Locating"),
    "is_exploring": number(name="Exploring"),
    "dock_type": number(name="Dock type"),
    "dust_collection_status": number(name="Dust collection status"),
    "auto_dust_collection": number(name="Auto dust collection"),
    "water_shortage_status": number(name="Water shortage"),
    "charge_status": number(name="Charge status"),
    "wash_status": number(name="Wash status"),
    "wash_phase": number(name="Wash phase"),
    "wash_ready": number(name="Wash ready"),
    "back_type": number(name="Back type"),
    "adbumper_status": json_value(role="json", name="Bumper status"),
    "debug_mode": number(name="Debug mode"),
    "avoid_count": number(name="Avoid count"),
    "msg_ver": number(name="Message version"),
    "msg_seq": number(name="Message sequence"),
    "dss": number(name="Docking station status word"),
}

CLEANING_RECORDS: dict[str, StateDeclaration] = {
    "begin": number(role="date", name="Start time"),
    "end": number(role="date", name="End time"),
    "duration": number(name="Duration", unit="s"),
    "area": number(name="Area", unit="mm²"),
    "error": number(name="Error"),
    "complete": boolean(role="indicator", name="Complete"),
    "start_type": number(name="Start type"),
    "clean_type": number(name="Clean type"),
    "finish_reason": number(name="Finish reason"),
    "dust_collection_status": number(name="Dust collection status"),
    "avoid_count": number(name="Avoid count"),
    "wash_count": number(name="Wash count"),
    "map_flag": number(name="Map flag"),
}

CLEANING_INFO: dict[str, StateDeclaration] = {
    "clean_time": number(name="Total clean time", unit="s"),
    "clean_area": number(name="Total clean area", unit="mm²"),
    "clean_count": number(name="Total clean count"),
    "dust_collection_count": number(name="Dust collection count"),
    "records": json_value(role="json", name="Record ids"),
}

NETWORK_INFO: dict[str, StateDeclaration] = {
    "ssid": text(name="SSID"),
    "ip": text(name="IP address"),
    "mac": text(name="MAC address"),
    "bssid": text(name="BSSID"),
    "rssi": number(role="value", name="Signal strength", unit="dBm"),
}

# ------------------------------------------------------------------
# Firmware feature names
# ------------------------------------------------------------------

FIRMWARE_FEATURES: dict[int, str] = {
    111: "isSupportFDSEndPoint",
    112: "isSupportAutoSplitSegments",
    114: "isSupportOrderSegmentClean",
    116: "isMapSegmentSupported",
    119: "isSupportLedStatusSwitch",
    120: "isMultiFloorSupported",
    122: "isSupportFetchTimerSummary",
    123: "isOrderCleanSupported",
    124: "isAnalysisSupported",
    125: "isRemoteSupported",
    126: "isSupportVoiceControlDebug",
}
