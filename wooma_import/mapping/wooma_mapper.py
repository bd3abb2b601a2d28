"""Map a parsed HelloReport onto the Wooma property/report schema."""

from __future__ import annotations

import logging
from typing import List

from wooma_import.models.parsed import Checklist, Detector, Key, Meter, ParsedReport, Room
from wooma_import.models.wooma import (
    WoomaChecklist,
    WoomaDetector,
    WoomaDocument,
    WoomaFieldAnswer,
    WoomaKey,
    WoomaMeter,
    WoomaProperty,
    WoomaQuestionAnswer,
    WoomaReport,
    WoomaRoom,
    WoomaRoomItem,
)
from wooma_import.utils.identifiers import IdFactory, generate_id, next_id

logger = logging.getLogger(__name__)

ROOM_ITEM_NAME = "General Overview"


class WoomaMapper:
    """Builds a ``WoomaDocument`` with fresh report, room and checklist ids."""

    def __init__(self, id_factory: IdFactory = generate_id) -> None:
        self.id_factory = id_factory

    def map(
        self,
        parsed: ParsedReport,
        user_id: str,
        property_id: str,
        report_type_id: str,
    ) -> WoomaDocument:
        report_id = next_id(self.id_factory)
        report = WoomaReport(
            id=report_id,
            property_id=property_id,
            report_type_id=report_type_id,
            status="IN_PROGRESS",
            completion_percentage=None,
            completion_date=None,
            pdf_url=None,
            pdf_generated_at=None,
            is_paid=False,
            payment_date=None,
            rooms=self.map_rooms(report_id, parsed.rooms),
            meters=self.map_meters(report_id, parsed.meters),
            keys=self.map_keys(report_id, parsed.keys),
            detectors=self.map_detectors(report_id, parsed.detectors),
            report_checklists=self.map_checklists(report_id, parsed.checklist),
        )
        logger.debug("Mapped report %s with %s rooms", report_id, len(report.rooms))
        header = parsed.property
        return WoomaDocument(
            property=WoomaProperty(
                user_id=user_id,
                address=header.address,
                postcode=header.postcode,
                city=header.city,
                reports=[report],
            )
        )

    def map_rooms(self, report_id: str, rooms: List[Room]) -> List[WoomaRoom]:
        mapped: List[WoomaRoom] = []
        for room in rooms:
            room_id = next_id(self.id_factory)
            mapped.append(
                WoomaRoom(
                    report_id=report_id,
                    name=room.name,
                    items=[
                        WoomaRoomItem(
                            room_id=room_id,
                            name=ROOM_ITEM_NAME,
                            general_condition=room.condition,
                            general_cleanliness=room.cleanliness,
                            description=room.description,
                            note=room.defects,
                        )
                    ],
                )
            )
        return mapped

    @staticmethod
    def map_meters(report_id: str, meters: List[Meter]) -> List[WoomaMeter]:
        return [
            WoomaMeter(
                report_id=report_id,
                name=meter.name,
                reading=meter.reading,
                location=meter.location,
                serial_number=meter.serial_number,
            )
            for meter in meters
        ]

    @staticmethod
    def map_keys(report_id: str, keys: List[Key]) -> List[WoomaKey]:
        return [
            WoomaKey(
                report_id=report_id,
                name=key.name,
                description=key.description,
                note=key.note,
                no_of_keys=key.no_of_keys,
            )
            for key in keys
        ]

    @staticmethod
    def map_detectors(report_id: str, detectors: List[Detector]) -> List[WoomaDetector]:
        return [
            WoomaDetector(
                report_id=report_id,
                name=detector.name,
                location=detector.location,
                note=detector.note,
                tested=detector.tested,
            )
            for detector in detectors
        ]

    def map_checklists(self, report_id: str, checklist: Checklist) -> List[WoomaChecklist]:
        # Question and field ids stay None until Wooma links them to its own checklist.
        if checklist.is_empty:
            return []
        report_checklist_id = next_id(self.id_factory)
        return [
            WoomaChecklist(
                report_id=report_id,
                checklist_id=None,
                question_answers=[
                    WoomaQuestionAnswer(
                        report_checklist_id=report_checklist_id,
                        checklist_question_id=None,
                        answer_option=answer.answer_option,
                        answer_text=answer.answer_text,
                    )
                    for answer in checklist.question_answers
                ],
                field_answers=[
                    WoomaFieldAnswer(
                        report_checklist_id=report_checklist_id,
                        checklist_field_id=None,
                        answer_text=answer.answer_text,
                    )
                    for answer in checklist.field_answers
                ],
            )
        ]


def map_to_wooma(
    parsed: ParsedReport,
    user_id: str,
    property_id: str,
    report_type_id: str,
    id_factory: IdFactory = generate_id,
) -> WoomaDocument:
    return WoomaMapper(id_factory).map(parsed, user_id, property_id, report_type_id)
