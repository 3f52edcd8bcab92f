# 경로 텍스트 안내 생성

from metro_routing.models.domain import Journey, StepKind

NO_ROUTE_MESSAGE = "No valid route found."


def format_journey(journey: Journey, start_label: str, end_label: str) -> str:
    if not journey.reachable:
        return f"No route found from {start_label} to {end_label}."

    lines = [f"Shortest path from {start_label} to {end_label}:"]

    for number, step in enumerate(journey.steps, start=1):
        if step.kind == StepKind.START:
            lines.append(f"({number}) Start: {step.station.name}")
        elif step.kind == StepKind.END:
            lines.append(f"({number}) End: {step.station.name}")
        elif step.kind == StepKind.CHANGE:
            lines.append(f"({number}) Change: {step.from_station} to {step.station}")
        else:
            lines.append(
                f"({number})\t{step.from_station} to {step.station} \t({step.minutes} mins)"
            )

    lines.append(f"Total Journey Time: {journey.total_time} minutes")
    return "\n".join(lines)
