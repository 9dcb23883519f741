from django.core.management.base import BaseCommand

from apps.sequences.services import bulk_sync_counters, get_counter_stats


class Command(BaseCommand):
    help = 'Sync ID counters with the highest identifiers already stored'

    def add_arguments(self, parser):
        parser.add_argument(
            '--stats',
            action='store_true',
            help='Only print counter statistics, do not sync',
        )

    def handle(self, *args, **options):
        if options['stats']:
            stats = get_counter_stats()
            self.stdout.write(f"Counters: {stats['total']}, total sequences: {stats['total_sequences']}")
            for counter_type, bucket in sorted(stats['by_type'].items()):
                self.stdout.write(f"  {counter_type}: {bucket['count']} counter(s), seq sum {bucket['total_seq']}")
            return

        results = bulk_sync_counters()
        for result in results:
            if result['success']:
                self.stdout.write(self.style.SUCCESS(f"{result['key']} -> {result['new_value']}"))
            else:
                self.stdout.write(self.style.ERROR(f"{result['key']}: {result['error']}"))

        failed = sum(1 for r in results if not r['success'])
        self.stdout.write(f"\nDone. {len(results) - failed} synced, {failed} failed.")
