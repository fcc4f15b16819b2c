# Generated migration for the wallet_address table

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='WalletAddress',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('trade_type', models.CharField(
                    db_index=True,
                    help_text='Network identifier (usdt.trc20, TRC20, ERC20, etc.)',
                    max_length=32
                )),
                ('address', models.CharField(
                    db_index=True,
                    help_text='Blockchain wallet address',
                    max_length=128
                )),
                ('status', models.SmallIntegerField(
                    choices=[(0, 'Disabled'), (1, 'Enabled')],
                    db_index=True,
                    default=1,
                    help_text='0=disabled, 1=enabled'
                )),
                ('other_notify', models.SmallIntegerField(
                    choices=[(0, 'Disabled'), (1, 'Enabled')],
                    default=0,
                    help_text='Notify on transfers not tied to an order'
                )),
                ('remark', models.CharField(
                    blank=True,
                    default='',
                    help_text='Operator note',
                    max_length=255
                )),
                ('created_at', models.DateTimeField(
                    auto_now_add=True,
                    help_text='When the address was registered'
                )),
                ('updated_at', models.DateTimeField(
                    auto_now=True,
                    help_text='Last update timestamp'
                )),
            ],
            options={
                'verbose_name': 'Wallet Address',
                'verbose_name_plural': 'Wallet Addresses',
                'db_table': 'wallet_address',
                'ordering': ['-updated_at'],
                'unique_together': {('trade_type', 'address')},
            },
        ),
    ]
