"""
Zone directory: which pricing zone serves a branch.

A branch without a zone (or an unknown branch id) resolves to None on that
side; callers must run validate_assignment before pricing such a pair.
"""

from dataclasses import dataclass, field

from apps.branches.models import Branch


@dataclass
class ZoneResolution:
    origin_zone_id:        int = None
    destination_zone_id:   int = None
    origin_zone_name:      str = None
    destination_zone_name: str = None

    @property
    def is_same_zone(self):
        return (
            self.origin_zone_id is not None
            and self.destination_zone_id is not None
            and self.origin_zone_id == self.destination_zone_id
        )

    @property
    def is_complete(self):
        return self.origin_zone_id is not None and self.destination_zone_id is not None


@dataclass
class AssignmentReport:
    errors:   list = field(default_factory=list)
    warnings: list = field(default_factory=list)

    @property
    def is_valid(self):
        return not self.errors


class ZoneDirectory:

    def _zone_of(self, branch_id):
        if branch_id is None:
            return None, None
        branch = (
            Branch.objects.select_related("zone")
            .filter(pk=branch_id)
            .first()
        )
        if branch is None or branch.zone is None:
            return None, None
        return branch.zone_id, branch.zone.name

    def resolve_zones(self, origin_branch_id, destination_branch_id) -> ZoneResolution:
        origin_id, origin_name = self._zone_of(origin_branch_id)
        dest_id, dest_name     = self._zone_of(destination_branch_id)
        return ZoneResolution(
            origin_zone_id=origin_id,
            destination_zone_id=dest_id,
            origin_zone_name=origin_name,
            destination_zone_name=dest_name,
        )

    def validate_assignment(self, origin_branch_id, destination_branch_id) -> AssignmentReport:
        resolution = self.resolve_zones(origin_branch_id, destination_branch_id)
        report = AssignmentReport()
        if resolution.origin_zone_id is None:
            report.errors.append("Origin branch does not have a zone assigned")
        if resolution.destination_zone_id is None:
            report.errors.append("Destination branch does not have a zone assigned")
        if resolution.is_same_zone:
            report.warnings.append("Both branches are in the same zone")
        return report

    def branches_in_zone(self, zone_id):
        return Branch.objects.filter(zone_id=zone_id).order_by("name")
